from __future__ import annotations

import pytest

from parametric_crc import crc8, crc16, crc32, crc64
from parametric_crc.catalogue import CRC_CATALOGUE, CRC_PARAMS, create_crc
from parametric_crc.config import CrcConfig, parse_crc_catalogue, parse_crc_params
from parametric_crc.engine import CrcType

from .conftest import CHECK_INPUT


def _named_crc_types():
    for module in (crc8, crc16, crc32, crc64):
        for attr, value in vars(module).items():
            if isinstance(value, CrcType):
                yield "{}.{}".format(module.__name__.rsplit(".", 1)[-1], attr), value


NAMED = list(_named_crc_types())


@pytest.mark.parametrize("label,t", NAMED, ids=[label for label, _ in NAMED])
def test_named_algorithms_match_catalogue(label, t):
    p = CRC_PARAMS[t.name.upper()]
    assert t.cfg == CrcConfig.from_params(p)
    assert t.calculate(CHECK_INPUT) == p["check"]
    assert t.residue_const == p["residue"]


def test_every_catalogue_entry_has_a_named_algorithm():
    names = {t.name for _, t in NAMED}
    missing = {e["name"] for e in CRC_CATALOGUE} - names
    assert missing == {"CRC-16/ZOO-A2EB-FF-LSB"}


def test_catalogue_widths():
    assert {e["width"] for e in CRC_CATALOGUE} == {8, 16, 32, 64}
    assert len(CRC_CATALOGUE) == 70


def test_aliases():
    assert crc32.crc32 is crc32.iso_hdlc
    assert crc16.ccitt_false is crc16.ibm_3740
    assert CRC_PARAMS["PKZIP"] is CRC_PARAMS["CRC-32/ISO-HDLC"]
    assert CRC_PARAMS["CRC-32C"]["name"] == "CRC-32/ISCSI"


def test_create_crc():
    t = create_crc("crc-16/modbus")
    assert t.name == "CRC-16/MODBUS"
    assert t.calculate(CHECK_INPUT) == 0x4B37
    assert create_crc("CRC-16/MODBUS", "tableless").mode == "tableless"
    assert create_crc("CRC-16/MODBUS", ref_reg=False).cfg.ref_reg is False
    assert create_crc("no such crc") is None


def test_parse_crc_params():
    p = parse_crc_params('width=16 poly=0xa2eb init=0xffff refin=true xorout=0xffff name="ZOO"')
    assert p["width"] == 16
    assert p["poly"] == 0xA2EB
    assert p["refin"] is True
    assert p["refout"] is True  # defaults to refin
    assert p["name"] == "ZOO"
    assert p["alias"] == []
    assert CrcConfig.from_params(p).ref_out is True


def test_parse_crc_params_defaults():
    p = parse_crc_params("width=8 poly=7")
    assert (p["init"], p["xorout"], p["refin"], p["refout"]) == (0, 0, False, False)
    assert p["name"] == "CUSTOM"


@pytest.mark.parametrize(
    "line",
    [
        "poly=0x07",
        "width=8",
        "width=8 poly=0x07 colour=red",
        "width=8 poly=0x07 refin=yes",
        "width=8 poly=0x07 init",
        "width=eight poly=0x07",
    ],
)
def test_parse_crc_params_errors(line):
    with pytest.raises(ValueError):
        parse_crc_params(line)


def test_parse_crc_catalogue_skips_comments_and_blank_lines():
    entries = parse_crc_catalogue(
        """
        # comment
        width=8 poly=0x07 name="A"

        width=16 poly=0x1021 name="B" alias="C,D"
        """
    )
    assert [e["name"] for e in entries] == ["A", "B"]
    assert entries[1]["alias"] == ["C", "D"]


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(width=12, poly=0x80f, init=0, xorout=0, ref_in=False),
        dict(width=8, poly=0x107, init=0, xorout=0, ref_in=False),
        dict(width=8, poly=0x07, init=0x100, xorout=0, ref_in=False),
        dict(width=8, poly=0x07, init=0, xorout=-1, ref_in=False),
    ],
)
def test_config_rejects_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        CrcConfig(**kwargs)


def test_config_derived_values():
    cfg = CrcConfig(16, 0x1021, 0x1d0f, 0, True)
    assert cfg.ref_out is True
    assert cfg.ref_reg is True
    assert cfg.actual_poly == 0x8408
    assert cfg.actual_init == 0xF0B8
    assert cfg.with_ref_reg(False).actual_init == 0x1D0F
    assert cfg.tbl_cfg.actual_poly == 0x8408
    assert str(cfg) == "width=16 poly=0x1021 init=0x1d0f refin=true refout=true xorout=0x0000"
    assert str(cfg.with_ref_reg(False)).endswith(" ref_reg=false")
