from __future__ import annotations

import pytest

from parametric_crc.config import CrcConfig
from parametric_crc.engine import crc_type, parametric
from parametric_crc.residue import (
    crc_to_bytes,
    make_codeword,
    residue_const,
    residue_const_naive,
)

from .conftest import CHECK_INPUT, config_of


def test_residue_const_matches_catalogue(entry, ref_reg):
    assert residue_const(config_of(entry, ref_reg)) == entry["residue"]


def test_codeword_leaves_residue_in_register(entry, mode, ref_reg):
    cfg = config_of(entry, ref_reg)
    t = crc_type(cfg, mode)
    table = t.create_table() if t.updater.external else None

    crc_val = t.calculate(CHECK_INPUT, table)
    if cfg.ref_in != cfg.ref_out:
        crc_val = int("{:0{w}b}".format(crc_val, w=cfg.width)[::-1], 2)
    # LSB first algorithms append the CRC in little endian byte order
    byteorder = "little" if cfg.ref_in else "big"
    codeword = CHECK_INPUT + crc_val.to_bytes(cfg.width // 8, byteorder)

    assert t().update(codeword, table).residue() == residue_const(cfg)


@pytest.mark.parametrize("dataword", [b"", b"hope it works...", bytes(range(256))])
def test_naive_residue_matches_closed_formula(entry, dataword):
    t = crc_type(config_of(entry))
    assert residue_const_naive(t, dataword) == t.residue_const


def test_residue_of_crossed_endian_model():
    # refin != refout: the CRC characters are reflected before they are
    # appended to the dataword
    cfg = CrcConfig(16, 0x1021, 0xffff, 0x0000, False, True)
    for ref_reg in (False, True):
        t = crc_type(cfg.with_ref_reg(ref_reg), "tableless")
        assert residue_const_naive(t, CHECK_INPUT) == residue_const(t.cfg)
    assert residue_const(cfg) == residue_const(cfg.with_ref_reg(True))


def test_make_codeword():
    xmodem = parametric(16, 0x1021, 0x0000, 0x0000, False)
    assert make_codeword(xmodem, CHECK_INPUT) == CHECK_INPUT + b"\x31\xc3"
    assert make_codeword(xmodem) == b"\x00\x00"


def test_crc_to_bytes():
    cfg = CrcConfig(32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True)
    assert crc_to_bytes(cfg, 0xCBF43926) == b"\x26\x39\xf4\xcb"
    cfg = CrcConfig(64, 0x42f0e1eba9ea3693, 0, 0, False)
    assert crc_to_bytes(cfg, 0x0102030405060708) == bytes(range(1, 9))


def test_residue_is_zero_without_xorout():
    # with xorout=0 a valid codeword always leaves a zero register behind
    for width, poly in ((8, 0x07), (16, 0x8005), (32, 0x1EDC6F41), (64, 0x1b)):
        for ref_in in (False, True):
            assert residue_const(CrcConfig(width, poly, (1 << width) - 1, 0, ref_in)) == 0
