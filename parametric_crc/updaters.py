# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Interchangeable CRC update strategies.

Every updater is built from a TableConfig and has an update() method that
receives the current CRC register and a bytes-like object and returns the new
register value. The "ext" updaters receive the lookup table as an extra
parameter so the caller controls the lifecycle of the table.

All of them produce identical results for identical input.
"""
from .bits import reversed_int8_bits
from .core import core
from .tables import SmallTable, Table, TableConfig, static_table


class TablelessUpdater:
    """ Bit-by-bit processing, requires no memory for a table. """
    mode = 'tableless'
    table_type = None
    external = False

    def __init__(self, tbl_cfg: TableConfig):
        self.tbl_cfg = tbl_cfg
        self._core = core(tbl_cfg.width, tbl_cfg.ref_reg)
        self._poly = tbl_cfg.actual_poly

    def update(self, crc: int, data) -> int:
        return self._core.tableless_update(self._poly, crc, data)

    def table_instance(self):
        return None


class TableBasedUpdater:
    """ One lookup per byte in a shared 256-entry table. """
    mode = 'table_based'
    table_type = Table
    external = False

    def __init__(self, tbl_cfg: TableConfig):
        self.tbl_cfg = tbl_cfg
        self._core = core(tbl_cfg.width, tbl_cfg.ref_reg)

    def table_instance(self) -> Table:
        return static_table(Table, self.tbl_cfg)

    def update(self, crc: int, data) -> int:
        # the plain tuple is faster to index than Table.__getitem__
        return self._core.table_based_update(crc, data, self.table_instance().entries)


class SmallTableBasedUpdater:
    """ Two lookups and a XOR per byte in a shared 16+16 entry table. """
    mode = 'small_table_based'
    table_type = SmallTable
    external = False

    def __init__(self, tbl_cfg: TableConfig):
        self.tbl_cfg = tbl_cfg
        self._core = core(tbl_cfg.width, tbl_cfg.ref_reg)

    def table_instance(self) -> SmallTable:
        return static_table(SmallTable, self.tbl_cfg)

    def update(self, crc: int, data) -> int:
        return self._core.table_based_update(crc, data, self.table_instance())


def _check_ext_table(table, table_type, tbl_cfg: TableConfig):
    if not isinstance(table, table_type):
        raise TypeError('expected a {} table, got {!r}'.format(table_type.__name__, table))
    if table.tbl_cfg != tbl_cfg:
        raise ValueError('the table was built for another CRC configuration: '
                         '{} (expected: {})'.format(table.tbl_cfg, tbl_cfg))


class ExtTableBasedUpdater:
    """ Same as TableBasedUpdater but with a table provided by the caller. """
    mode = 'ext_table_based'
    table_type = Table
    external = True

    def __init__(self, tbl_cfg: TableConfig):
        self.tbl_cfg = tbl_cfg
        self._core = core(tbl_cfg.width, tbl_cfg.ref_reg)

    def update(self, crc: int, data, table: Table) -> int:
        _check_ext_table(table, Table, self.tbl_cfg)
        return self._core.table_based_update(crc, data, table.entries)


class ExtSmallTableBasedUpdater:
    """ Same as SmallTableBasedUpdater but with a table provided by the caller. """
    mode = 'ext_small_table_based'
    table_type = SmallTable
    external = True

    def __init__(self, tbl_cfg: TableConfig):
        self.tbl_cfg = tbl_cfg
        self._core = core(tbl_cfg.width, tbl_cfg.ref_reg)

    def update(self, crc: int, data, table: SmallTable) -> int:
        _check_ext_table(table, SmallTable, self.tbl_cfg)
        return self._core.table_based_update(crc, data, table)


class InputReverser:
    """ Wraps an updater and reverses the bits of every input byte before
    passing it on. This is needed only when refin != ref_reg. """

    def __init__(self, updater):
        self.updater = updater
        self.mode = updater.mode
        self.table_type = updater.table_type
        self.external = updater.external
        self.tbl_cfg = updater.tbl_cfg

    def update(self, crc: int, data, *table) -> int:
        update = self.updater.update
        for b in data:
            crc = update(crc, (reversed_int8_bits[b],), *table)
        return crc

    def table_instance(self):
        return self.updater.table_instance()


MODES = {
    'tableless': TablelessUpdater,
    'table_based': TableBasedUpdater,
    'small_table_based': SmallTableBasedUpdater,
    'ext_table_based': ExtTableBasedUpdater,
    'ext_small_table_based': ExtSmallTableBasedUpdater,
}


def create_updater(mode: str, tbl_cfg: TableConfig, reverse_input: bool = False):
    try:
        updater_class = MODES[mode]
    except KeyError:
        raise ValueError('invalid mode: {!r} (valid modes: {})'.format(
            mode, ', '.join(MODES))) from None
    updater = updater_class(tbl_cfg)
    return InputReverser(updater) if reverse_input else updater
