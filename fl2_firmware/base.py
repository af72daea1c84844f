'''Base provides the shared detection result and structure types.
'''

import ctypes
from collections import namedtuple

from .utils import blue, green, purple


class FL2Exception(Exception):
    '''Base for all errors raised by this package.'''


class ReadError(FL2Exception):

    def __init__(self, path, offset, length, reason=None):
        message = "Cannot read 0x%x bytes at offset 0x%x from (%s)." % (
            length, offset, path)
        if reason is not None:
            message = "%s (%s)" % (message, reason)
        FL2Exception.__init__(self, message)
        self.path = path
        self.offset = offset
        self.length = length


class UnrecognizedContainer(FL2Exception):

    def __init__(self, path, size):
        message = "Unrecognized FL2 container (%s), size %d bytes." % (
            path, size)
        FL2Exception.__init__(self, message)
        self.path = path
        self.size = size


class UnsupportedOperation(FL2Exception):

    def __init__(self, variant, operation):
        message = "The %s container does not support '%s'." % (
            variant, operation)
        FL2Exception.__init__(self, message)
        self.variant = variant
        self.operation = operation


PayloadLocation = namedtuple("PayloadLocation", ["offset", "length"])


class StructuredObject(object):
    def __init__(self):
        self.fields = []

    def parse_structure(self, data, structure):
        '''Construct an instance object of the provided structure.'''
        struct_instance = structure()
        struct_size = ctypes.sizeof(struct_instance)

        struct_data = data[:struct_size]
        struct_length = min(len(struct_data), struct_size)
        ctypes.memmove(
            ctypes.addressof(struct_instance), struct_data, struct_length)
        self.structure = struct_instance
        self.structure_data = struct_data
        self.structure_fields = [field[0] for field in structure._fields_]
        self.structure_size = struct_size

    def show_structure(self):
        for field in self.fields:
            value = getattr(self.structure, field, None)
            if isinstance(value, int):
                value = "0x%x (%d)" % (value, value)
            print("%s: %s" % (field, value))


class ProbeResult(object):
    '''A positive detection: where the image is and how it was found.

    Args:
        variant (object): The probe that recognized the container, it may
            expose 'extract' and 'insert' capabilities.
        location (PayloadLocation): Offset and length of the image.
        flags (dict): Variant metadata such as 'encrypted' and 'trailer'.
        header (Optional[object]): The decoded header, if the variant has one.
    '''

    def __init__(self, variant, location, flags, header=None):
        self.variant = variant
        self.location = location
        self.flags = flags
        self.header = header

    @property
    def name(self):
        return self.variant.name

    @property
    def offset(self):
        return self.location.offset

    @property
    def length(self):
        return self.location.length

    def supports(self, operation):
        '''Check if the detected variant implements the operation.'''
        return callable(getattr(self.variant, operation, None))

    def info(self):
        return {
            "variant": self.name,
            "offset": self.offset,
            "length": self.length,
            "flags": dict(self.flags),
        }

    def __eq__(self, other):
        if not isinstance(other, ProbeResult):
            return NotImplemented
        return self.info() == other.info()

    def __repr__(self):
        return "ProbeResult(%s, offset=0x%x, length=0x%x)" % (
            self.name, self.offset, self.length)

    def showinfo(self, ts='', index=None):
        print("%s%s offset 0x%x length 0x%x (%d bytes) flags[ %s ]" % (
            ts, blue("%s:" % self.name), self.offset, self.length,
            self.length,
            ", ".join(["%s: %s" % (k, green(v))
                       for k, v in sorted(self.flags.items())])
        ))
        if self.header is not None:
            print("%s%s" % (ts, purple("Header:")))
            self.header.show_structure()
