# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Residue constant calculation.

Using the residue constant is one way to check for errors. A codeword is a
dataword (a piece of data) with its CRC appended in the correct bit and byte
order. Feeding the whole codeword into the CRC calculator leaves the residue
constant in the CRC register (before the xorout step) if the codeword isn't
corrupted. Software CRC implementations often perform the check without the
residue: https://en.wikipedia.org/wiki/Cyclic_redundancy_check
"""
import functools

from .bits import reflect_if
from .config import CrcConfig
from .core import core


@functools.lru_cache(maxsize=None)
def residue_const(cfg: CrcConfig) -> int:
    """ This implementation is based on the description provided by the RevEng
    project in its CRC catalogue:

        Residue:
        The contents of the register after initialising, reading an error-free
        codeword and optionally reflecting the register (if refout=true), but
        not applying the final XOR. This is mathematically equivalent to
        initialising the register with the xorout parameter, reflecting it as
        described (if refout=true), reading as many zero bits as there are cells
        in the register, and reflecting the result (if refin=true). The residue
        of a crossed-endian model is calculated assuming that the characters of
        the received CRC are specially reflected before submitting the codeword.

    The above description assumes an unreflected CRC shift register, the
    reflections below are adjusted to the ref_reg setting of the config. """
    residue = reflect_if(cfg.ref_reg != cfg.ref_out, cfg.xorout, cfg.width)
    residue = core(cfg.width, cfg.ref_reg).bbb_update_wide(cfg.actual_poly, residue, 0)
    return reflect_if(cfg.ref_reg != cfg.ref_in, residue, cfg.width)


def crc_to_bytes(cfg: CrcConfig, crc: int) -> bytes:
    """ Serializes a final CRC value in the bit and byte order that turns a
    dataword into a valid codeword when appended to it. """
    crc = reflect_if(cfg.ref_in != cfg.ref_out, crc, cfg.width)
    return crc.to_bytes(cfg.width // 8, 'little' if cfg.ref_in else 'big')


def make_codeword(crc_type, dataword: bytes = b'') -> bytes:
    return bytes(dataword) + crc_to_bytes(crc_type.cfg, crc_type.calculate(dataword))


def residue_const_naive(crc_type, dataword: bytes = b'') -> int:
    """ This is the naive method to calculate the residue constant. It forms a
    valid codeword by calculating the CRC of the dataword and appending the CRC
    to that dataword. The CRC of the codeword is calculated without the xorout
    step to get the residue constant. Unlike residue_const() this one doesn't
    have to know the reflectedness of the CRC register. The dataword can be
    anything including the empty string, it won't affect the result.

    Works only with modes that don't need an external table. """
    # The codeword (data+crc) is what the sender transmits through a channel.
    # The residue constant should appear in the CRC register of the receiver
    # after receiving all bits of the codeword without transmission errors.
    return crc_type().update(make_codeword(crc_type, dataword)).residue()
