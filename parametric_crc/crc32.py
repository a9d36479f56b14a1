# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
""" 32-bit CRC algorithms: https://reveng.sourceforge.io/crc-catalogue/17plus.htm """
from .engine import parametric

xfer       = parametric(32, 0x000000af, 0x00000000, 0x00000000, False, name='CRC-32/XFER')
jamcrc     = parametric(32, 0x04c11db7, 0xffffffff, 0x00000000, True,  name='CRC-32/JAMCRC')
iso_hdlc   = parametric(32, 0x04c11db7, 0xffffffff, 0xffffffff, True,  name='CRC-32/ISO-HDLC')
cksum      = parametric(32, 0x04c11db7, 0x00000000, 0xffffffff, False, name='CRC-32/CKSUM')
mpeg2      = parametric(32, 0x04c11db7, 0xffffffff, 0x00000000, False, name='CRC-32/MPEG-2')
bzip2      = parametric(32, 0x04c11db7, 0xffffffff, 0xffffffff, False, name='CRC-32/BZIP2')
iscsi      = parametric(32, 0x1edc6f41, 0xffffffff, 0xffffffff, True,  name='CRC-32/ISCSI')
mef        = parametric(32, 0x741b8cd7, 0xffffffff, 0x00000000, True,  name='CRC-32/MEF')
cd_rom_edc = parametric(32, 0x8001801b, 0x00000000, 0x00000000, True,  name='CRC-32/CD-ROM-EDC')
aixm       = parametric(32, 0x814141ab, 0x00000000, 0x00000000, False, name='CRC-32/AIXM')
base91_d   = parametric(32, 0xa833982b, 0xffffffff, 0xffffffff, True,  name='CRC-32/BASE91-D')
autosar    = parametric(32, 0xf4acfb13, 0xffffffff, 0xffffffff, True,  name='CRC-32/AUTOSAR')

crc32 = iso_hdlc
pkzip = iso_hdlc
v42 = iso_hdlc
xz = iso_hdlc
posix = cksum
castagnoli = iscsi
c = iscsi
d = base91_d
q = aixm
