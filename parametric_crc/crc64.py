# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
""" 64-bit CRC algorithms: https://reveng.sourceforge.io/crc-catalogue/17plus.htm """
from .engine import parametric

go_iso   = parametric(64, 0x000000000000001b, 0xffffffffffffffff, 0xffffffffffffffff, True,  name='CRC-64/GO-ISO')
ms       = parametric(64, 0x259c84cba6426349, 0xffffffffffffffff, 0x0000000000000000, True,  name='CRC-64/MS')
xz       = parametric(64, 0x42f0e1eba9ea3693, 0xffffffffffffffff, 0xffffffffffffffff, True,  name='CRC-64/XZ')
ecma_182 = parametric(64, 0x42f0e1eba9ea3693, 0x0000000000000000, 0x0000000000000000, False, name='CRC-64/ECMA-182')
we       = parametric(64, 0x42f0e1eba9ea3693, 0xffffffffffffffff, 0xffffffffffffffff, False, name='CRC-64/WE')
redis    = parametric(64, 0xad93d23594c935a9, 0x0000000000000000, 0x0000000000000000, True,  name='CRC-64/REDIS')

crc64 = ecma_182
go_ecma = xz
