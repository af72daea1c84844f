# -*- coding: utf-8 -*-

import os
import sys
import binascii


def blue(msg):
    '''Return the input string as console-escaped blue.'''
    return "\033[1;36m%s\033[1;m" % msg


def red(msg):
    '''Return the input string as console-escaped red.'''
    return "\033[31m%s\033[1;m" % msg


def green(msg):
    '''Return the input string as console-escaped green.'''
    return "\033[32m%s\033[1;m" % msg


def purple(msg):
    '''Return the input string as console-escaped purple.'''
    return "\033[1;35m%s\033[1;m" % msg


def print_error(msg):
    '''Write the input string to stderr.'''
    print(msg, file=sys.stderr)


def ascii_char(c):
    '''Return the ASCII or (.) representation of the input byte value.'''
    if c >= 32 and c <= 126:
        return chr(c)
    return '.'


def hex_dump(data, size=16, base=0):
    '''Print a debug view of binary data similar to a hex editor

    Args:
        data (binary): Data to be printed.
        size (Optional[int]): Length of each line.
        base (Optional[int]): Offset shown for the first line.
    '''
    for i in range(0, len(data), size):
        line = data[i:i + size]
        print("%08x: %s | %s" % (
            base + i,
            binascii.hexlify(line).decode("ascii").ljust(size * 2),
            "".join([ascii_char(c) for c in line])
        ))


def dump_data(name, data):
    '''Write binary data to name.

    Args:
        name (string): Path to output file, created if it does not exist.
        data (binary): Content to be written.

    Return:
        bool: True if the file was written.
    '''
    try:
        if os.path.dirname(name) != '':
            if not os.path.exists(os.path.dirname(name)):
                os.makedirs(os.path.dirname(name))
        with open(name, 'wb') as fh:
            fh.write(data)
        print("Wrote: %s" % (red(name)))
    except (IOError, OSError) as e:
        print_error("Error: could not write (%s), (%s)." % (name, str(e)))
        return False
    return True
