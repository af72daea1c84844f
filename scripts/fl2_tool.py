#!/usr/bin/env python
# -*- coding: utf-8 -*-

# FL2 Firmware Update Tool
#
# Lenovo/IBM EC firmware updates (FL2 files) wrap the embedded controller
# image in one of several containers. This script detects the container and
# reports where the image lives, and can copy the image out of the FL2.

import argparse
import sys

from fl2_firmware import commands


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Locate the EC image within an FL2 update.")
    parser.add_argument(
        '-v', "--verbose", action="store_true", default=False,
        help="Show why each container variant did or did not match.")
    parser.add_argument(
        "command", choices=commands.COMMANDS,
        help="check: detect only, from_fl2: extract image, to_fl2: insert image")
    parser.add_argument("fl2", help="The FL2 file to work on")
    parser.add_argument("img", nargs="?", default=None, help="The image file")
    args = parser.parse_args(argv)

    return commands.run(args.command, args.fl2, args.img, args.verbose)


if __name__ == "__main__":
    sys.exit(main())
