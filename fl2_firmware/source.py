'''Bounded, read-only access to a container file.
'''

import os

from .base import ReadError


class ByteSource(object):
    '''A read-only view over an open file.

    The size is captured once when the file is opened and every read is
    bounded by it. Blocks are never cached, each read goes to the file.
    '''

    def __init__(self, fh, path=None):
        self.fh = fh
        self.path = path
        self._size = os.fstat(fh.fileno()).st_size

    @classmethod
    def open(cls, path):
        '''Open path for reading, an IOError/OSError propagates to the caller.
        '''
        fh = open(path, 'rb')
        return cls(fh, path)

    def size(self):
        return self._size

    def read_block(self, offset, length):
        '''Read exactly length bytes starting at offset.

        Raises:
            ReadError: the offset cannot be sought to or fewer than length
                bytes are available.
        '''
        if offset < 0 or length < 0:
            raise ReadError(self.path, offset, length)
        if offset + length > self._size:
            raise ReadError(self.path, offset, length)
        try:
            self.fh.seek(offset)
            data = self.fh.read(length)
        except (IOError, OSError, ValueError) as e:
            raise ReadError(self.path, offset, length, str(e))
        if len(data) != length:
            raise ReadError(self.path, offset, length)
        return data

    def close(self):
        if self.fh is not None:
            self.fh.close()
            self.fh = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
