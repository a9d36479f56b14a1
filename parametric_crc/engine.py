# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
The high level CRC API.

A CrcType is a CRC algorithm (CrcConfig) bound to one of the update modes:

- table_based:           (the default) 256 table entries generated on first
                         use and shared by all users of the same table config
- small_table_based:     32 shared table entries, two lookups + XOR per byte
- ext_table_based:       256 external table entries provided by the user
- ext_small_table_based: 32 external table entries provided by the user
- tableless:             bit-by-bit processing, no table

Usage:

    xmodem = parametric(16, 0x1021, 0x0000, 0x0000, False)
    crc_val = xmodem.calculate(b'123456789')
OR
    crc_obj = xmodem()
    crc_obj.update(b'12345')
    crc_obj.update(b'6789')
    crc_val = crc_obj.final()

The ext modes need the table as an extra parameter:

    ext = xmodem.ext_table_based
    table = ext.create_table()
    crc_val = ext.calculate(b'123456789', table)
"""
import functools

from .bits import reflect_if
from .config import CrcConfig
from .residue import crc_to_bytes, residue_const
from .updaters import MODES, create_updater


def _as_bytes(data):
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, int):
        if not 0 <= data <= 0xff:
            raise ValueError('a single byte has to be in the range [0..255]: %r' % data)
        return (data,)
    if isinstance(data, str):
        raise TypeError('str has to be encoded to bytes before CRC calculation')
    try:
        mv = memoryview(data)
    except TypeError:
        raise TypeError('expected a bytes-like object or an int, got %s'
                        % type(data).__name__) from None
    # cast() works only with C-contiguous buffers
    return mv.cast('B') if mv.c_contiguous else mv.tobytes()


class Crc:
    """ CRC calculator object with an internal CRC register.

    The value returned by interim() can be passed to the constructor to
    continue the calculation later, but only with the same CrcType. Mixing
    interim values of different CRC algorithms or modes is a misuse that goes
    undetected and yields meaningless results. The value of final() shouldn't
    be used as an interim value either, that works only with some CRC
    algorithms. """
    __slots__ = ('crc_type', '_crc')

    def __init__(self, crc_type, interim: int = None):
        self.crc_type = crc_type
        if interim is None:
            interim = crc_type.cfg.actual_init
        elif not 0 <= interim <= crc_type.cfg.mask:
            raise ValueError('interim value 0x{:x} does not fit in {} bits'.format(
                interim, crc_type.cfg.width))
        self._crc = interim

    def update(self, data, table=None):
        """ Feeds bytes into the CRC register. The table is required by the
        ext_* modes and not accepted by the others. Returns self. """
        updater = self.crc_type.updater
        if updater.external:
            if table is None:
                raise TypeError('the %s mode requires a table parameter' % updater.mode)
            self._crc = updater.update(self._crc, _as_bytes(data), table)
        else:
            if table is not None:
                raise TypeError('the %s mode does not accept a table parameter' % updater.mode)
            self._crc = updater.update(self._crc, _as_bytes(data))
        return self

    def interim(self) -> int:
        return self._crc

    def residue(self) -> int:
        cfg = self.crc_type.cfg
        return reflect_if(cfg.ref_reg != cfg.ref_out, self._crc, cfg.width)

    def final(self) -> int:
        return self.residue() ^ self.crc_type.cfg.xorout

    def final_bytes(self) -> bytes:
        """ The final CRC in the bit and byte order of a codeword. """
        return crc_to_bytes(self.crc_type.cfg, self.final())

    def check_residue(self) -> bool:
        """ Returns True if the data fed so far was an error-free codeword. """
        return self.residue() == self.crc_type.residue_const

    def copy(self):
        return Crc(self.crc_type, self._crc)

    def __repr__(self):
        return '<Crc {} interim=0x{:0{w}x}>'.format(
            self.crc_type, self._crc, w=self.crc_type.cfg.hex_digits)


class CrcType:
    """ Calling a CrcType creates a Crc object. Use the crc_type() function
    or the parametric() function instead of instantiating this class directly
    so that identical CrcTypes are shared. """

    def __init__(self, cfg: CrcConfig, mode: str = 'table_based', name: str = None):
        self.cfg = cfg
        self.mode = mode
        self.name = name
        self.updater = create_updater(mode, cfg.tbl_cfg, cfg.ref_in != cfg.ref_reg)

    @property
    def residue_const(self) -> int:
        return residue_const(self.cfg)

    @property
    def table_type(self):
        return self.updater.table_type

    def table_instance(self):
        """ The shared table of the table_based and small_table_based modes. """
        if self.updater.external:
            raise TypeError('the %s mode has no internal table' % self.mode)
        return self.updater.table_instance()

    def create_table(self, generate: bool = True):
        """ Creates a table for the ext modes. With generate=False the table
        is zero filled and has to be generated with table.generate() later. """
        if self.table_type is None:
            raise TypeError('the %s mode does not use a table' % self.mode)
        return self.table_type(self.cfg.tbl_cfg, generate=generate)

    def __call__(self, interim: int = None) -> Crc:
        return Crc(self, interim)

    def calculate(self, data, table=None) -> int:
        return Crc(self).update(data, table).final()

    def with_ref_reg(self, ref_reg: bool):
        return crc_type(self.cfg.with_ref_reg(ref_reg), self.mode, self.name)

    def with_mode(self, mode: str):
        return crc_type(self.cfg, mode, self.name)

    @property
    def tableless(self):
        return self.with_mode('tableless')

    @property
    def table_based(self):
        return self.with_mode('table_based')

    @property
    def small_table_based(self):
        return self.with_mode('small_table_based')

    @property
    def ext_table_based(self):
        return self.with_mode('ext_table_based')

    @property
    def ext_small_table_based(self):
        return self.with_mode('ext_small_table_based')

    def __repr__(self):
        return '<CrcType {}{} mode={}>'.format(
            self.name + ' ' if self.name else '', self.cfg, self.mode)


def crc_type(cfg: CrcConfig, mode: str = 'table_based', name: str = None) -> CrcType:
    if mode not in MODES:
        raise ValueError('invalid mode: {!r} (valid modes: {})'.format(mode, ', '.join(MODES)))
    return _crc_type(cfg, mode, name)


@functools.lru_cache(maxsize=None)
def _crc_type(cfg: CrcConfig, mode: str, name: str) -> CrcType:
    return CrcType(cfg, mode, name)


def parametric(width: int, poly: int, init: int, xorout: int, ref_in: bool,
               ref_out: bool = None, ref_reg: bool = None, *, name: str = None,
               mode: str = 'table_based') -> CrcType:
    """ Creates a CrcType from the parameters of a CRC algorithm. The poly and
    init parameters are expected in unreflected form, this is the format used
    in the RevEng CRC catalogue. """
    return crc_type(CrcConfig(width, poly, init, xorout, ref_in, ref_out, ref_reg), mode, name)
