'''FL2 firmware update parser.
'''

from . import fl2

from .misc import checker
from .base import (
    FL2Exception, ReadError, UnrecognizedContainer, UnsupportedOperation,
    PayloadLocation, ProbeResult)
from .source import ByteSource


class DetectionChain(object):
    '''Detect which container variant wraps the EC image.

    FL2 updates come in several variants:
      - AllFillPrefix: a large image preceded by 4KiB of 0xFF
      - GarbagePrefix: a large image with a 0xFF region at 0x21000
      - NoPrefix: the file is the image
      - HeaderPrefix: a 32-byte header, the image, and maybe a trailer

    Each probe is tried in order and the first match is returned.
    '''

    def __init__(self, source, probes=None, debug=False):
        '''Create a DetectionChain instance.

        Args:
            source (ByteSource): The opened container.
            probes (Optional[list]): Ordered probes, defaults to all variants.
            debug (Optional[bool]): Report why each probe did not match.
        '''
        self.source = source
        self.probes = checker.PROBES if probes is None else probes
        self.debug = debug

    def detect(self):
        '''Return the first matching probe result.

        Raises:
            UnrecognizedContainer: no probe matched.
        '''
        for probe in self.probes:
            result = fl2.run_probe(probe, self.source, debug=self.debug)
            if result is not None:
                return result
        raise UnrecognizedContainer(self.source.path, self.source.size())

    def probe_all(self):
        '''Apply every probe without stopping at the first match.

        Return:
            list: (variant name, ProbeResult or None) for each probe.
        '''
        return [
            (probe.name, fl2.run_probe(probe, self.source, debug=self.debug))
            for probe in self.probes
        ]


def detect_file(path, debug=False):
    '''Open path and detect its container variant.

    An IOError/OSError from opening the file aborts before any probe runs.
    '''
    with ByteSource.open(path) as source:
        return DetectionChain(source, debug=debug).detect()


__title__ = "fl2_firmware"
__version__ = "0.1"
__author__ = "FL2 firmware contributors"
__license__ = "BSD"
