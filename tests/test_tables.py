from __future__ import annotations

import pytest

from parametric_crc.core import (
    core,
    generate_small_table,
    generate_table,
    generate_table_simple,
)
from parametric_crc.tables import SmallTable, Table, TableConfig, static_table

from .conftest import config_of


def test_dense_and_small_tables_are_equivalent(entry, ref_reg):
    tbl_cfg = config_of(entry, ref_reg).tbl_cfg
    dense = Table(tbl_cfg)
    small = SmallTable(tbl_cfg)
    for i in range(256):
        assert dense[i] == small.first_row[i & 0xf] ^ small.first_column[i >> 4]
        assert dense[i] == small[i]


def test_nibble_generator_matches_simple_generator(entry, ref_reg):
    tbl_cfg = config_of(entry, ref_reg).tbl_cfg
    args = (tbl_cfg.actual_poly, tbl_cfg.width, tbl_cfg.ref_reg)
    assert generate_table(*args) == generate_table_simple(*args)


def test_small_table_reuses_first_row_and_column(entry, ref_reg):
    tbl_cfg = config_of(entry, ref_reg).tbl_cfg
    args = (tbl_cfg.actual_poly, tbl_cfg.width, tbl_cfg.ref_reg)
    entries = generate_table(*args)
    first_row, first_column = generate_small_table(*args)
    assert first_row == entries[:16]
    assert first_column == entries[::16]


def test_index_zero_maps_to_zero(entry, ref_reg):
    tbl_cfg = config_of(entry, ref_reg).tbl_cfg
    assert Table(tbl_cfg)[0] == 0
    assert SmallTable(tbl_cfg)[0] == 0


def test_crc32_reflected_table_entries():
    table = Table(TableConfig(32, 0x04C11DB7, True))
    assert table[1] == 0x77073096
    assert table[128] == 0xEDB88320
    assert table[255] == 0x2D02EF8D


def test_crc16_ccitt_unreflected_table_entries():
    table = Table(TableConfig(16, 0x1021, False))
    assert table[1] == 0x1021
    assert table[2] == 0x2042
    assert table[255] == 0x1EF0


def test_crc8_table_entry_is_single_byte_crc():
    # With width 8 and init 0 a table entry is the CRC of the index byte.
    table = Table(TableConfig(8, 0x07, False))
    c = core(8, False)
    for i in range(256):
        assert table[i] == c.tableless_update(0x07, 0, bytes([i]))


def test_tables_depend_only_on_table_config():
    a = TableConfig(32, 0x04C11DB7, True)
    b = TableConfig(32, 0x04C11DB7, True)
    assert a == b
    assert static_table(Table, a) is static_table(Table, b)
    assert static_table(SmallTable, a) is static_table(SmallTable, b)
    assert static_table(Table, a) is not static_table(Table, TableConfig(32, 0x04C11DB7, False))


def test_uninitialized_table_can_be_generated_later():
    tbl_cfg = TableConfig(16, 0x8005, True)
    table = Table(tbl_cfg, generate=False)
    assert all(table[i] == 0 for i in range(256))
    table.generate()
    assert table == Table(tbl_cfg)

    small = SmallTable(tbl_cfg, generate=False)
    assert small.first_row == (0,) * 16
    small.generate()
    assert small == SmallTable(tbl_cfg)


def test_table_from_entries():
    tbl_cfg = TableConfig(16, 0x1021, False)
    generated = Table(tbl_cfg)
    assert Table.from_entries(tbl_cfg, list(generated.entries)) == generated
    with pytest.raises(ValueError):
        Table.from_entries(tbl_cfg, generated.entries[:255])
    with pytest.raises(ValueError):
        Table.from_entries(tbl_cfg, (0x10000,) + generated.entries[1:])


def test_table_config_actual_poly():
    assert TableConfig(16, 0x1021, False).actual_poly == 0x1021
    assert TableConfig(16, 0x1021, True).actual_poly == 0x8408


@pytest.mark.parametrize("width,poly", [(12, 0x80f), (8, 0x107), (16, -1)])
def test_table_config_rejects_invalid_parameters(width, poly):
    with pytest.raises(ValueError):
        TableConfig(width, poly, False)
