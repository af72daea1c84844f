# -*- coding: utf-8 -*-
'''FL2 container variants.

An FL2 update wraps one EC image. The wrapping differs between machines and
is recognized from structural fingerprints only: the total file size, regions
of fill bytes, an optional fixed header, and a copyright marker found inside
every genuine image. Each probe below tests one wrapping, the ordered list of
probes lives in misc.checker.
'''

from .base import PayloadLocation, ProbeResult, ReadError, StructuredObject
from .structs.fl2_structs import *
from .utils import print_error


def check_copyright(source, base):
    '''Search for the copyright marker relative to a candidate image offset.

    Args:
        source (ByteSource): The container.
        base (int): Candidate offset of the image within the container.

    Return:
        int: The sub-offset that matched, otherwise None.
    '''
    for sub_offset in COPYRIGHT_OFFSETS:
        try:
            data = source.read_block(
                base + sub_offset, len(COPYRIGHT_MARKER))
        except ReadError:
            return None
        if data == COPYRIGHT_MARKER:
            return sub_offset
    return None


def check_fill(source, offset, length):
    '''Check that a region consists entirely of the fill byte.'''
    return source.read_block(offset, length) == FILL_BYTE * length


def extract_payload(source, location):
    '''Read the image bytes described by location.'''
    return source.read_block(location.offset, location.length)


def _mismatch(probe, debug, reason):
    if debug:
        print_error("%s: %s" % (probe.name, reason))
    return None


def _verified(probe, source, location, flags, header=None, debug=False):
    size = source.size()
    if location.offset + location.length > size:
        return _mismatch(probe, debug, "image 0x%x+0x%x exceeds size %d" % (
            location.offset, location.length, size))

    sub_offset = check_copyright(source, location.offset)
    if sub_offset is None:
        return _mismatch(probe, debug, "no copyright marker near 0x%x" % (
            location.offset))

    flags = dict(flags)
    flags["copyright"] = sub_offset
    return ProbeResult(probe, location, flags, header)


def run_probe(probe, source, debug=False):
    '''Apply one probe, a read failure is treated as a mismatch.

    Return:
        ProbeResult: The detection, or None if the probe did not match.
    '''
    try:
        return probe.match(source, source.size(), debug=debug)
    except ReadError as e:
        return _mismatch(probe, debug, str(e))


class FL2Header(StructuredObject):
    '''The fixed header found at the start of some FL2 containers.

    The header is a 4-byte signature followed by seven little-endian 32-bit
    values. Only the file size and image size are understood. The last value
    might be a checksum but no algorithm is known, so it is never checked.
    '''

    size = FL2_HEADER_SIZE

    def __init__(self, data):
        self.parse_structure(data, FL2HeaderType)
        self.fields = [
            "FileSize", "ImgSize",
            "Unknown1", "Unknown2", "Unknown3", "Unknown4",
            "MaybeChecksum"
        ]

    @classmethod
    def read(cls, source):
        return cls(source.read_block(0, cls.size))

    @property
    def signature(self):
        return bytes(bytearray(self.structure.Signature))

    @property
    def valid_signature(self):
        return self.signature == FL2_HEADER_SIGNATURE

    @property
    def file_size(self):
        return self.structure.FileSize

    @property
    def img_size(self):
        return self.structure.ImgSize

    @property
    def maybe_checksum(self):
        return self.structure.MaybeChecksum

    @property
    def unknowns(self):
        return [getattr(self.structure, "Unknown%d" % i) for i in range(1, 5)]

    def show_structure(self):
        print("Signature: %r" % self.signature)
        StructuredObject.show_structure(self)


class KnownSizeProbe(object):
    '''Recognize a container from its exact size and an optional fill region.

    Args:
        name (string): Variant name reported on detection.
        sizes (dict): Total size to (image offset, image length).
        encrypted (bool): Whether images in this variant are encrypted.
        fill_window (Optional[tuple]): (offset, length) of a region that must
            consist of fill bytes.
        whole_file (Optional[bool]): The image is the entire container.
    '''

    extract = staticmethod(extract_payload)

    def __init__(self, name, sizes, encrypted, fill_window=None,
                 whole_file=False):
        self.name = name
        self.sizes = sizes
        self.encrypted = encrypted
        self.fill_window = fill_window
        self.whole_file = whole_file

    def match(self, source, size, debug=False):
        if size not in self.sizes:
            return _mismatch(self, debug, "size %d is not known" % size)

        if self.fill_window is not None:
            offset, length = self.fill_window
            if not check_fill(source, offset, length):
                return _mismatch(self, debug, "0x%x-0x%x is not filled" % (
                    offset, offset + length))

        if self.whole_file:
            location = PayloadLocation(0, size)
        else:
            location = PayloadLocation(*self.sizes[size])
        flags = {"encrypted": self.encrypted, "trailer": TRAILER_ABSENT}
        return _verified(self, source, location, flags, debug=debug)

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.name)


class HeaderPrefixProbe(object):
    '''Recognize a container that starts with an FL2Header.

    The header image size either excludes a trailing signature block, which
    then follows the image, or already counts it.
    '''

    name = "HeaderPrefix"
    extract = staticmethod(extract_payload)

    def __init__(self, encrypted_sizes=None):
        if encrypted_sizes is None:
            encrypted_sizes = HEADER_PREFIX_ENCRYPTED
        self.encrypted_sizes = encrypted_sizes

    def match(self, source, size, debug=False):
        if size < FL2_HEADER_SIZE:
            return _mismatch(self, debug, "too small for a header")

        header = FL2Header.read(source)
        if not header.valid_signature:
            return _mismatch(self, debug, "bad signature %r" % (
                header.signature))
        if header.file_size != size:
            return _mismatch(self, debug, "header size %d, actual %d" % (
                header.file_size, size))

        if header.img_size + FL2_HEADER_SIZE + FL2_TRAILER_SIZE == size:
            trailer = TRAILER_EXTERNAL
        elif header.img_size + FL2_HEADER_SIZE == size:
            trailer = TRAILER_INTERNAL
        else:
            return _mismatch(self, debug, "image size 0x%x does not fit" % (
                header.img_size))

        if size not in self.encrypted_sizes:
            return _mismatch(self, debug, "size %d is not known" % size)

        location = PayloadLocation(FL2_HEADER_SIZE, header.img_size)
        flags = {
            "encrypted": self.encrypted_sizes[size],
            "trailer": trailer,
        }
        return _verified(
            self, source, location, flags, header=header, debug=debug)

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.name)
