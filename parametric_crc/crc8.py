# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
""" 8-bit CRC algorithms: https://reveng.sourceforge.io/crc-catalogue/1-15.htm """
from .engine import parametric

rohc       = parametric(8, 0x07, 0xff, 0x00, True,  name='CRC-8/ROHC')
i_432_1    = parametric(8, 0x07, 0x00, 0x55, False, name='CRC-8/I-432-1')     # Alias: CRC-8/ITU
smbus      = parametric(8, 0x07, 0x00, 0x00, False, name='CRC-8/SMBUS')       # Alias: CRC-8
tech_3250  = parametric(8, 0x1d, 0xff, 0x00, True,  name='CRC-8/TECH-3250')   # Alias: CRC-8/AES, CRC-8/EBU
gsm_a      = parametric(8, 0x1d, 0x00, 0x00, False, name='CRC-8/GSM-A')
mifare_mad = parametric(8, 0x1d, 0xc7, 0x00, False, name='CRC-8/MIFARE-MAD')
i_code     = parametric(8, 0x1d, 0xfd, 0x00, False, name='CRC-8/I-CODE')
hitag      = parametric(8, 0x1d, 0xff, 0x00, False, name='CRC-8/HITAG')
sae_j1850  = parametric(8, 0x1d, 0xff, 0xff, False, name='CRC-8/SAE-J1850')
opensafety = parametric(8, 0x2f, 0x00, 0x00, False, name='CRC-8/OPENSAFETY')
autosar    = parametric(8, 0x2f, 0xff, 0xff, False, name='CRC-8/AUTOSAR')
maxim_dow  = parametric(8, 0x31, 0x00, 0x00, True,  name='CRC-8/MAXIM-DOW')   # Alias: CRC-8/MAXIM, DOW-CRC
nrsc_5     = parametric(8, 0x31, 0xff, 0x00, False, name='CRC-8/NRSC-5')
darc       = parametric(8, 0x39, 0x00, 0x00, True,  name='CRC-8/DARC')
gsm_b      = parametric(8, 0x49, 0x00, 0xff, False, name='CRC-8/GSM-B')
wcdma      = parametric(8, 0x9b, 0x00, 0x00, True,  name='CRC-8/WCDMA')
lte        = parametric(8, 0x9b, 0x00, 0x00, False, name='CRC-8/LTE')
cdma2000   = parametric(8, 0x9b, 0xff, 0x00, False, name='CRC-8/CDMA2000')
bluetooth  = parametric(8, 0xa7, 0x00, 0x00, True,  name='CRC-8/BLUETOOTH')
dvb_s2     = parametric(8, 0xd5, 0x00, 0x00, False, name='CRC-8/DVB-S2')

crc8 = smbus
itu = i_432_1
aes = tech_3250
ebu = tech_3250
maxim = maxim_dow
