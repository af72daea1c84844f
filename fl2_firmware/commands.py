# -*- coding: utf-8 -*-
'''Command implementations for the fl2_tool script.

Each command returns the process exit status.
'''

import os

from . import DetectionChain
from .base import FL2Exception, UnsupportedOperation
from .source import ByteSource
from .utils import print_error, dump_data, red, hex_dump


COMMANDS = ("check", "from_fl2", "to_fl2")
REQUIRE_IMAGE = ("from_fl2", "to_fl2")


def _open(path):
    try:
        return ByteSource.open(path)
    except (IOError, OSError) as e:
        print_error("Error: Cannot read file (%s) (%s)." % (path, str(e)))
        return None


def _require(result, operation):
    if not result.supports(operation):
        raise UnsupportedOperation(result.name, operation)


def _show_candidates(chain):
    for name, result in chain.probe_all():
        print("  %s: %s" % (name, "match" if result else "no match"))


def check(fl2_path, verbose=False):
    '''Detect and describe the container variant of fl2_path.'''
    source = _open(fl2_path)
    if source is None:
        return 1

    with source:
        chain = DetectionChain(source, debug=verbose)
        try:
            result = chain.detect()
        except FL2Exception as e:
            print_error("Error: %s" % str(e))
            return 1

        result.showinfo()
        if verbose:
            _show_candidates(chain)
            if result.header is not None:
                hex_dump(result.header.structure_data)
    return 0


def from_fl2(fl2_path, img_path, verbose=False):
    '''Copy the EC image out of fl2_path into img_path.'''
    source = _open(fl2_path)
    if source is None:
        return 1

    with source:
        try:
            result = DetectionChain(source, debug=verbose).detect()
            result.showinfo()
            _require(result, "extract")
            data = result.variant.extract(source, result.location)
        except FL2Exception as e:
            print_error("Error: %s" % str(e))
            return 1

    if not dump_data(img_path, data):
        return 1
    return 0


def to_fl2(fl2_path, img_path, verbose=False):
    '''Put the EC image from img_path back into fl2_path.'''
    if not os.path.isfile(img_path):
        print_error("Error: Cannot read file (%s)." % img_path)
        return 1

    source = _open(fl2_path)
    if source is None:
        return 1

    with source:
        try:
            result = DetectionChain(source, debug=verbose).detect()
            result.showinfo()
            _require(result, "insert")
        except UnsupportedOperation as e:
            print_error("Error: %s" % str(e))
            print_error(
                "Inserting images is not implemented for %s containers, "
                "rebuild %s with the vendor tools instead." % (
                    result.name, red(fl2_path)))
            return 1
        except FL2Exception as e:
            print_error("Error: %s" % str(e))
            return 1

        with open(img_path, 'rb') as fh:
            image = fh.read()
        data = result.variant.insert(source, result, image)

    if not dump_data(fl2_path, data):
        return 1
    return 0


def run(command, fl2_path, img_path=None, verbose=False):
    '''Dispatch a command by name.'''
    if command not in COMMANDS:
        print_error("Error: Unknown command (%s)." % command)
        return 1
    if command in REQUIRE_IMAGE and img_path is None:
        print_error("Error: The %s command requires an image file." % command)
        return 1

    if command == "check":
        return check(fl2_path, verbose)
    if command == "from_fl2":
        return from_fl2(fl2_path, img_path, verbose)
    return to_fl2(fl2_path, img_path, verbose)
