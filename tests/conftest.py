from __future__ import annotations

import pytest

from parametric_crc.catalogue import CRC_CATALOGUE
from parametric_crc.config import CrcConfig
from parametric_crc.updaters import MODES


CHECK_INPUT = b"123456789"


def catalogue_ids(entries) -> list[str]:
    return [e["name"] for e in entries]


def config_of(entry: dict, ref_reg: bool | None = None) -> CrcConfig:
    return CrcConfig.from_params(entry, ref_reg)


def calculate(t, data: bytes) -> int:
    """Calculates a CRC with any mode, creating a table for the ext modes."""
    table = t.create_table() if t.updater.external else None
    return t.calculate(data, table)


@pytest.fixture(params=CRC_CATALOGUE, ids=catalogue_ids(CRC_CATALOGUE))
def entry(request) -> dict:
    return request.param


@pytest.fixture(params=list(MODES))
def mode(request) -> str:
    return request.param


@pytest.fixture(params=[False, True], ids=["unreflected_reg", "reflected_reg"])
def ref_reg(request) -> bool:
    return request.param
