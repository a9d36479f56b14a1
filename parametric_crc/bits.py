# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
""" Bit reflection helpers for 8, 16, 32 and 64 bit words. """

SUPPORTED_WIDTHS = (8, 16, 32, 64)


def _reverse_int8_bits(v: int):
    v = ((v >> 1) & 0x55) | ((v & 0x55) << 1)
    v = ((v >> 2) & 0x33) | ((v & 0x33) << 2)
    return ((v >> 4) | (v << 4)) & 0xff


reversed_int8_bits = tuple(_reverse_int8_bits(i) for i in range(256))


def reverse_bits(value: int, width: int):
    """ Reverses the bit order of a width-bit unsigned integer.
    Wider words are reflected by reflecting their two halves and swapping them
    so the 8-bit lookup table is reused by every supported width. """
    if width not in SUPPORTED_WIDTHS:
        raise ValueError('unsupported width: %r' % (width,))
    if not 0 <= value < (1 << width):
        raise ValueError('value 0x{:x} does not fit in {} bits'.format(value, width))
    return _reverse(value, width)


def _reverse(value: int, width: int):
    if width == 8:
        return reversed_int8_bits[value]
    half = width >> 1
    lo = value & ((1 << half) - 1)
    return (_reverse(lo, half) << half) | _reverse(value >> half, half)


def reflect_if(condition: bool, value: int, width: int):
    return reverse_bits(value, width) if condition else value
