import ctypes

FILL_BYTE = b"\xFF"

# The EC image content is verified by this marker at one of two places.
COPYRIGHT_MARKER = b"(C) Copyright IBM Corp. 2001, 2005 All Rights Reserved "
COPYRIGHT_OFFSETS = (0x268, 0x264)

FL2_HEADER_SIGNATURE = b"_EC\x01"
FL2_HEADER_SIZE = 32
FL2_TRAILER_SIZE = 256

# Fill windows as (start, length).
ALL_FILL_WINDOW = (0x0, 0x1000)
GARBAGE_FILL_WINDOW = (0x21000, 0x1000)

# Total container size: (image offset, image length).
ALL_FILL_SIZES = {
    8523776:  (0x500000, 0x20000),
    12718080: (0x500000, 0x30000),
    16912384: (0x500000, 0x30000),
}

GARBAGE_PREFIX_SIZES = {
    4240490:  (0x290000, 0x20000),
}

NO_PREFIX_SIZES = {
    196608:   (0x0, 0x30000),
}

# Total container size: image is encrypted.
HEADER_PREFIX_ENCRYPTED = {
    196896: True,
    286752: False,
}

TRAILER_EXTERNAL = "external"
TRAILER_INTERNAL = "internal"
TRAILER_ABSENT = "absent"

uint8_t = ctypes.c_ubyte
uint32_t = ctypes.c_uint


class FL2HeaderType(ctypes.LittleEndianStructure):
    _fields_ = [
        ("Signature",     uint8_t * 4),  # _EC\x01
        ("FileSize",      uint32_t),     # Entire container
        ("ImgSize",       uint32_t),     # May or may not include the trailer
        ("Unknown1",      uint32_t),     #
        ("Unknown2",      uint32_t),     #
        ("Unknown3",      uint32_t),     #
        ("Unknown4",      uint32_t),     #
        ("MaybeChecksum", uint32_t),     # Not validated
    ]
