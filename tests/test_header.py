import unittest

from fl2_firmware.fl2 import FL2Header

from fl2_fixtures import fl2_header


class FL2HeaderTest(unittest.TestCase):

    def test_decode(self):
        header = FL2Header(fl2_header(
            196896, 0x30000, checksum=0x12345678, unknowns=(1, 2, 3, 4)))
        self.assertTrue(header.valid_signature)
        self.assertEqual(header.signature, b"_EC\x01")
        self.assertEqual(header.file_size, 196896)
        self.assertEqual(header.img_size, 0x30000)
        self.assertEqual(header.unknowns, [1, 2, 3, 4])
        self.assertEqual(header.maybe_checksum, 0x12345678)
        self.assertEqual(header.structure_size, 32)

    def test_little_endian(self):
        data = b"_EC\x01" + b"\x20\x01\x03\x00" + b"\x00" * 24
        header = FL2Header(data)
        self.assertEqual(header.file_size, 0x30120)
        self.assertEqual(header.img_size, 0)

    def test_bad_signature(self):
        header = FL2Header(fl2_header(196896, 0x30000, signature=b"EC I"))
        self.assertFalse(header.valid_signature)

    def test_short_data(self):
        header = FL2Header(b"_EC\x01\x10")
        self.assertTrue(header.valid_signature)
        self.assertEqual(header.file_size, 0x10)
        self.assertEqual(header.maybe_checksum, 0)


if __name__ == '__main__':
    unittest.main()
