# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Low level CRC register operations.

There is one core per (width, reflected) combination. A reflected core works
with an LSB-first CRC shift register, an unreflected core with an MSB-first
register. The poly parameter of the functions below is always the "actual"
polynomial: the catalogue polynomial reflected if the register is reflected.

Registers are plain ints so every update function returns the new value of
the register instead of modifying it in place.
"""
import functools

from .bits import SUPPORTED_WIDTHS


class UnreflectedCore:
    reflected = False
    # table_entry() can skip the upper nibble of the first row's indexes
    # because it's zero.
    row_skip_bits = 4
    column_skip_bits = 0

    def __init__(self, width: int):
        self.width = width
        self.mask = (1 << width) - 1
        self.msb_mask = 1 << (width - 1)

    def bbb_update(self, poly: int, crc: int, b: int, num_bits: int = 8) -> int:
        """ Table-less bit-by-bit update. If num_bits<8 then the unused
        (8-num_bits) least significant bits of b have to be zeros. """
        mask, msb_mask = self.mask, self.msb_mask
        crc ^= b << (self.width - 8)
        for _ in range(num_bits):
            crc = ((crc << 1) & mask) ^ poly if crc & msb_mask else (crc << 1) & mask
        return crc

    def bbb_update_wide(self, poly: int, crc: int, word: int) -> int:
        """ Bit-by-bit update with as many bits as the register has. """
        mask, msb_mask = self.mask, self.msb_mask
        crc ^= word
        for _ in range(self.width):
            crc = ((crc << 1) & mask) ^ poly if crc & msb_mask else (crc << 1) & mask
        return crc

    def tableless_update(self, poly: int, crc: int, data) -> int:
        for b in data:
            crc = self.bbb_update(poly, crc, b)
        return crc

    def table_based_update(self, crc: int, data, table) -> int:
        """ The table can be anything that accepts indexes in the range
        [0..255] through the subscript operator: a list of 256 entries, a
        Table or a SmallTable. """
        shift, mask = self.width - 8, self.mask
        for b in data:
            crc = table[(crc >> shift) ^ b] ^ ((crc << 8) & mask)
        return crc

    def table_entry(self, poly: int, index: int, skip_bits: int = 0) -> int:
        """ Calculates the value of a single table entry. """
        return self.bbb_update(poly, 0, (index << skip_bits) & 0xff, 8 - skip_bits)


class ReflectedCore:
    reflected = True
    # table_entry() can skip the lower nibble of the first column's indexes
    # because it's zero.
    row_skip_bits = 0
    column_skip_bits = 4

    def __init__(self, width: int):
        self.width = width
        self.mask = (1 << width) - 1

    def bbb_update(self, ref_poly: int, crc: int, b: int, num_bits: int = 8) -> int:
        """ Table-less bit-by-bit update. If num_bits<8 then the unused
        (8-num_bits) most significant bits of b have to be zeros. """
        crc ^= b
        for _ in range(num_bits):
            crc = (crc >> 1) ^ ref_poly if crc & 1 else crc >> 1
        return crc

    def bbb_update_wide(self, ref_poly: int, crc: int, word: int) -> int:
        crc ^= word
        for _ in range(self.width):
            crc = (crc >> 1) ^ ref_poly if crc & 1 else crc >> 1
        return crc

    def tableless_update(self, ref_poly: int, crc: int, data) -> int:
        for b in data:
            crc = self.bbb_update(ref_poly, crc, b)
        return crc

    def table_based_update(self, crc: int, data, table) -> int:
        for b in data:
            crc = table[(crc & 0xff) ^ b] ^ (crc >> 8)
        return crc

    def table_entry(self, ref_poly: int, index: int, skip_bits: int = 0) -> int:
        return self.bbb_update(ref_poly, 0, index >> skip_bits, 8 - skip_bits)


@functools.lru_cache(maxsize=None)
def core(width: int, reflected: bool):
    if width not in SUPPORTED_WIDTHS:
        raise ValueError('unsupported width: %r' % (width,))
    return ReflectedCore(width) if reflected else UnreflectedCore(width)


def generate_table_simple(poly: int, width: int, reflected: bool) -> [int]:
    c = core(width, reflected)
    return [c.table_entry(poly, i) for i in range(256)]


def generate_table(poly: int, width: int, reflected: bool) -> [int]:
    c = core(width, reflected)
    entries = [0] * 256
    # the first row
    for i in range(1, 0x10):
        entries[i] = c.table_entry(poly, i, c.row_skip_bits)

    # 15 more rows
    #
    # table[i xor j] == table[i] xor table[j]
    # source: https://en.wikipedia.org/wiki/Computation_of_cyclic_redundancy_checks#Generating_the_tables
    #
    # k and i are the upper and lower nibbles of the index so xor works like
    # addition.
    for k in range(0x10, 0x100, 0x10):
        entries[k] = c.table_entry(poly, k, c.column_skip_bits)
        for i in range(1, 0x10):
            entries[k ^ i] = entries[k] ^ entries[i]
    return entries


def generate_small_table(poly: int, width: int, reflected: bool) -> ([int], [int]):
    c = core(width, reflected)
    first_row = [0] + [c.table_entry(poly, i, c.row_skip_bits)
                       for i in range(1, 0x10)]
    first_column = [0] + [c.table_entry(poly, k << 4, c.column_skip_bits)
                          for k in range(1, 0x10)]
    return first_row, first_column
