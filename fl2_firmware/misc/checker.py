"""
The ordered set of FL2 container probes.

Probes are tried first to last and the first match wins. The known-size
tables are disjoint today, so the order only matters if they come to overlap.
"""

from ..fl2 import KnownSizeProbe, HeaderPrefixProbe
from ..structs.fl2_structs import *


ALL_FILL_PREFIX = KnownSizeProbe(
    "AllFillPrefix", ALL_FILL_SIZES, encrypted=True,
    fill_window=ALL_FILL_WINDOW)

GARBAGE_PREFIX = KnownSizeProbe(
    "GarbagePrefix", GARBAGE_PREFIX_SIZES, encrypted=False,
    fill_window=GARBAGE_FILL_WINDOW)

NO_PREFIX = KnownSizeProbe(
    "NoPrefix", NO_PREFIX_SIZES, encrypted=True, whole_file=True)

HEADER_PREFIX = HeaderPrefixProbe(HEADER_PREFIX_ENCRYPTED)

PROBES = [
    ALL_FILL_PREFIX,
    GARBAGE_PREFIX,
    NO_PREFIX,
    HEADER_PREFIX,
]


def known_sizes(probe):
    '''Return the container sizes a probe can recognize.'''
    if hasattr(probe, "sizes"):
        return set(probe.sizes)
    return set(probe.encrypted_sizes)
