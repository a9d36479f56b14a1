# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
CRC algorithm parameters.

The parameters follow the format used in the CRC catalogue of the CRC RevEng
project: https://reveng.sourceforge.io/crc-catalogue/all.htm
Precise description of the CRC algorithm parameters:
https://reveng.sourceforge.io/crc-catalogue/all.htm#crc.legend.params

I believe that the names of these parameters come from an old document that
explains CRC algorithms in layman's terms and proposes a parametric CRC model:
A PAINLESS GUIDE TO CRC ERROR DETECTION ALGORITHMS by Ross N. Williams
http://www.ross.net/crc/download/crc_v3.txt (or just search for crc_v3.txt)
"""
import dataclasses
from dataclasses import dataclass

from .bits import SUPPORTED_WIDTHS, reflect_if
from .tables import TableConfig


@dataclass(frozen=True)
class CrcConfig:
    """
    A CRC algorithm has two reflect parameters (ref_in, ref_out) while the
    implementation has a third one that is usually hardcoded: the
    reflectedness of the CRC shift register (ref_reg). A CRC algorithm
    produces the same output irrespective of the value of ref_reg but
    different settings come with different trade-offs. If ref_reg != ref_in
    then the bit order has to be reversed in every byte of the input data,
    this is why the default is ref_reg = ref_in.

    The poly and init parameters are always in unreflected form. This is how
    the RevEng CRC catalogue and the literature usually refer to them
    regardless of the value of the refin and refout parameters.
    """
    width: int
    poly: int
    init: int
    xorout: int
    ref_in: bool
    ref_out: bool = None
    ref_reg: bool = None

    def __post_init__(self):
        if self.ref_out is None:
            object.__setattr__(self, 'ref_out', self.ref_in)
        if self.ref_reg is None:
            object.__setattr__(self, 'ref_reg', self.ref_in)
        if self.width not in SUPPORTED_WIDTHS:
            raise ValueError('unsupported width: {!r} (supported widths: {})'.format(
                self.width, ', '.join(map(str, SUPPORTED_WIDTHS))))
        for name in ('poly', 'init', 'xorout'):
            value = getattr(self, name)
            if not 0 <= value < (1 << self.width):
                raise ValueError('{}=0x{:x} does not fit in {} bits'.format(
                    name, value, self.width))

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def hex_digits(self) -> int:
        return self.width // 4

    @property
    def actual_poly(self) -> int:
        return reflect_if(self.ref_reg, self.poly, self.width)

    @property
    def actual_init(self) -> int:
        return reflect_if(self.ref_reg, self.init, self.width)

    @property
    def tbl_cfg(self) -> TableConfig:
        return TableConfig(self.width, self.poly, self.ref_reg)

    def with_ref_reg(self, ref_reg: bool):
        return dataclasses.replace(self, ref_reg=ref_reg)

    @classmethod
    def from_params(cls, params: dict, ref_reg: bool = None):
        return cls(params['width'], params['poly'], params['init'], params['xorout'],
                   params['refin'], params['refout'], ref_reg)

    def __str__(self):
        s = 'width={} poly=0x{:0{w}x} init=0x{:0{w}x} refin={} refout={} xorout=0x{:0{w}x}'.format(
            self.width, self.poly, self.init, str(self.ref_in).lower(),
            str(self.ref_out).lower(), self.xorout, w=self.hex_digits)
        return s if self.ref_reg == self.ref_in else s + ' ref_reg=' + str(self.ref_reg).lower()


def parse_crc_params(line: str) -> dict:
    try:
        m = {k: v for k, v in (field.split('=', 1) for field in line.split())}
    except ValueError:
        raise ValueError('expected space separated key=value pairs: %r' % line) from None
    if 'width' not in m or 'poly' not in m:
        raise ValueError('the required "width" or "poly" field is missing')
    invalid = set(m.keys()) - {'width', 'poly', 'init', 'refin', 'refout',
                               'xorout', 'check', 'residue', 'name', 'alias'}
    if invalid:
        raise ValueError('invalid parameters: ' + ', '.join(sorted(invalid)))
    def unquote(s):
        return s[1:-1] if s.startswith('"') and s.endswith('"') else s
    def to_bool(s):
        if s.lower() not in ('true', 'false'):
            raise ValueError('invalid bool value: %r' % s)
        return s.lower() == 'true'
    return {
        'width': int(m['width'], 0),
        'poly': int(m['poly'], 0),
        'init': int(m.get('init', '0'), 0),
        'refin': to_bool(m.get('refin', 'false')),
        'refout': to_bool(m.get('refout', m.get('refin', 'false'))),
        'xorout': int(m.get('xorout', '0'), 0),
        'check': int(m.get('check', '0'), 0),
        'residue': int(m.get('residue', '0'), 0),
        'name': unquote(m.get('name', 'CUSTOM')),
        'alias': [s for s in unquote(m.get('alias', '')).split(',') if s],
    }


def parse_crc_catalogue(crc_catalogue_file_contents: str) -> [dict]:
    lines = (x.strip() for x in crc_catalogue_file_contents.splitlines())
    return [parse_crc_params(x) for x in lines if x and not x.startswith('#')]
