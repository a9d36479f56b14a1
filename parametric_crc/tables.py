# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Lookup tables for the table based CRC update modes.

The contents of a table depend only on the width, the polynomial and the
reflectedness of the CRC register so CRC algorithms that differ only in their
init, xorout, refin or refout parameters can share their tables. This is what
TableConfig describes.

Both table types accept indexes in the range [0..255] through the subscript
operator. A Table stores all 256 entries while a SmallTable (also known as a
"nibble lookup table") stores only the first row and the first column of the
16x16 table and turns every lookup into two lookups and a XOR.
"""
import functools
import logging
from dataclasses import dataclass

from .bits import SUPPORTED_WIDTHS, reflect_if
from .core import generate_small_table, generate_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableConfig:
    width: int
    poly: int  # unreflected poly
    ref_reg: bool  # reflected CRC shift register and table entries

    def __post_init__(self):
        if self.width not in SUPPORTED_WIDTHS:
            raise ValueError('unsupported width: %r' % (self.width,))
        if not 0 <= self.poly < (1 << self.width):
            raise ValueError('poly 0x{:x} does not fit in {} bits'.format(self.poly, self.width))

    @property
    def actual_poly(self) -> int:
        return reflect_if(self.ref_reg, self.poly, self.width)

    def __str__(self):
        return 'width={} poly=0x{:0{w}x} ref_reg={}'.format(
            self.width, self.poly, self.ref_reg, w=self.width // 4)


class Table:
    """ 256 entries. Pass generate=False to create a zero filled table and
    call generate() on it later. """

    def __init__(self, tbl_cfg: TableConfig, *, generate: bool = True):
        self.tbl_cfg = tbl_cfg
        self.entries = (0,) * 256
        if generate:
            self.generate()

    @classmethod
    def from_entries(cls, tbl_cfg: TableConfig, entries):
        """ Wraps entries that were generated elsewhere, for example a table
        that was loaded from a file or pasted into the source code. """
        entries = tuple(entries)
        if len(entries) != 256:
            raise ValueError('a table needs 256 entries, got %d' % len(entries))
        limit = 1 << tbl_cfg.width
        if any(not 0 <= e < limit for e in entries):
            raise ValueError('table entries have to fit in %d bits' % tbl_cfg.width)
        table = cls(tbl_cfg, generate=False)
        table.entries = entries
        return table

    def generate(self):
        c = self.tbl_cfg
        self.entries = tuple(generate_table(c.actual_poly, c.width, c.ref_reg))
        logger.debug('generated table: %s', c)

    def __getitem__(self, index: int) -> int:
        return self.entries[index]

    def __len__(self):
        return 256

    def __eq__(self, other):
        if not isinstance(other, Table):
            return NotImplemented
        return self.tbl_cfg == other.tbl_cfg and self.entries == other.entries

    __hash__ = None

    def __repr__(self):
        return '<Table {}>'.format(self.tbl_cfg)


class SmallTable:
    """ 16+16 entries. entry(i) = first_row[i & 0xf] ^ first_column[i >> 4] """

    def __init__(self, tbl_cfg: TableConfig, *, generate: bool = True):
        self.tbl_cfg = tbl_cfg
        self.first_row = (0,) * 16
        self.first_column = (0,) * 16
        if generate:
            self.generate()

    def generate(self):
        c = self.tbl_cfg
        row, column = generate_small_table(c.actual_poly, c.width, c.ref_reg)
        self.first_row, self.first_column = tuple(row), tuple(column)
        logger.debug('generated small table: %s', c)

    def __getitem__(self, index: int) -> int:
        return self.first_row[index & 0x0f] ^ self.first_column[index >> 4]

    def __len__(self):
        return 256

    def __eq__(self, other):
        if not isinstance(other, SmallTable):
            return NotImplemented
        return (self.tbl_cfg == other.tbl_cfg and self.first_row == other.first_row
                and self.first_column == other.first_column)

    __hash__ = None

    def __repr__(self):
        return '<SmallTable {}>'.format(self.tbl_cfg)


@functools.lru_cache(maxsize=None)
def static_table(table_type, tbl_cfg: TableConfig):
    """ Returns the shared instance of the given table type. Tables are never
    modified after generation so they can be shared between any number of CRC
    calculators and threads. """
    return table_type(tbl_cfg)
