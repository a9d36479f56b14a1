# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Parametric CRC-8 / CRC-16 / CRC-32 / CRC-64 calculator

Find the CRC algorithm you need in the crc8, crc16, crc32 or crc64 module
and use it like this:

    from parametric_crc import crc16
    crc_val = crc16.xmodem.calculate(b'123456789')
OR
    crc_obj = crc16.xmodem()
    crc_obj.update(b'12345')
    crc_obj.update(b'6789')
    crc_val = crc_obj.final()

Other CRC algorithms can be created with the parametric() function, see the
engine module for the available update modes. Execute the package as a
command to calculate CRCs or to test the builtin CRC algorithms.

The library was tested against the parameters of all the 8, 16, 32 and 64 bit
CRC algorithms that are listed in the CRC catalogue of the CRC RevEng project:
https://reveng.sourceforge.io/crc-catalogue/all.htm
"""
from . import crc8, crc16, crc32, crc64
from .bits import reflect_if, reverse_bits
from .catalogue import CRC_CATALOGUE, CRC_PARAMS, create_crc
from .config import CrcConfig
from .engine import Crc, CrcType, crc_type, parametric
from .residue import residue_const
from .tables import SmallTable, Table, TableConfig, static_table

__all__ = [
    'crc8', 'crc16', 'crc32', 'crc64',
    'reflect_if', 'reverse_bits',
    'CRC_CATALOGUE', 'CRC_PARAMS', 'create_crc',
    'CrcConfig',
    'Crc', 'CrcType', 'crc_type', 'parametric',
    'residue_const',
    'SmallTable', 'Table', 'TableConfig', 'static_table',
]
