import os
import struct
import shutil
import tempfile
import unittest

from fl2_firmware.structs.fl2_structs import (
    COPYRIGHT_MARKER, FL2_HEADER_SIGNATURE, FL2_HEADER_SIZE, FL2_TRAILER_SIZE)


def write_container(path, size, regions):
    '''Write a sparse container of size bytes with (offset, data) regions.'''
    with open(path, 'wb') as fh:
        fh.truncate(size)
        for offset, data in regions:
            fh.seek(offset)
            fh.write(data)


def fl2_header(file_size, img_size, checksum=0, signature=FL2_HEADER_SIGNATURE,
               unknowns=(0, 0, 0, 0)):
    return struct.pack(
        "<4s7I", signature, file_size, img_size,
        unknowns[0], unknowns[1], unknowns[2], unknowns[3], checksum)


def marker(base, sub_offset=0x268, corrupt=False):
    data = COPYRIGHT_MARKER
    if corrupt:
        data = data[:10] + b"X" + data[11:]
    return (base + sub_offset, data)


def fill(offset, length):
    return (offset, b"\xFF" * length)


class ContainerTestCase(unittest.TestCase):
    '''Provide a scratch directory and builders for each container variant.'''

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def path(self, name="update.fl2"):
        return os.path.join(self.tmpdir, name)

    def build(self, size, regions, name="update.fl2"):
        path = self.path(name)
        write_container(path, size, regions)
        return path

    def build_all_fill(self, size, offset, **kwargs):
        return self.build(size, [fill(0, 0x1000), marker(offset, **kwargs)])

    def build_garbage(self, size, offset, **kwargs):
        return self.build(size, [
            (0, b"\x5A" * 0x1000), fill(0x21000, 0x1000),
            marker(offset, **kwargs)])

    def build_no_prefix(self, size=196608, **kwargs):
        return self.build(size, [marker(0, **kwargs)])

    def build_header(self, size, img_size, file_size=None, checksum=0,
                     signature=FL2_HEADER_SIGNATURE, **kwargs):
        if file_size is None:
            file_size = size
        header = fl2_header(file_size, img_size, checksum, signature)
        return self.build(size, [
            (0, header), marker(FL2_HEADER_SIZE, **kwargs)])

    def build_header_external(self, size=196896, **kwargs):
        img_size = size - FL2_HEADER_SIZE - FL2_TRAILER_SIZE
        return self.build_header(size, img_size, **kwargs)

    def build_header_internal(self, size=286752, **kwargs):
        return self.build_header(size, size - FL2_HEADER_SIZE, **kwargs)
