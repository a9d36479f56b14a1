# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
""" 16-bit CRC algorithms: https://reveng.sourceforge.io/crc-catalogue/16.htm """
from .engine import parametric

dect_x       = parametric(16, 0x0589, 0x0000, 0x0000, False, name='CRC-16/DECT-X')       # Alias: X-CRC-16
dect_r       = parametric(16, 0x0589, 0x0000, 0x0001, False, name='CRC-16/DECT-R')       # Alias: R-CRC-16
nrsc_5       = parametric(16, 0x080b, 0xffff, 0x0000, True,  name='CRC-16/NRSC-5')
dnp          = parametric(16, 0x3d65, 0x0000, 0xffff, True,  name='CRC-16/DNP')
en_13757     = parametric(16, 0x3d65, 0x0000, 0xffff, False, name='CRC-16/EN-13757')
kermit       = parametric(16, 0x1021, 0x0000, 0x0000, True,  name='CRC-16/KERMIT')
tms37157     = parametric(16, 0x1021, 0x89ec, 0x0000, True,  name='CRC-16/TMS37157')
riello       = parametric(16, 0x1021, 0xb2aa, 0x0000, True,  name='CRC-16/RIELLO')
a            = parametric(16, 0x1021, 0xc6c6, 0x0000, True,  name='CRC-16/ISO-IEC-14443-3-A')  # Alias: CRC-A
mcrf4xx      = parametric(16, 0x1021, 0xffff, 0x0000, True,  name='CRC-16/MCRF4XX')
ibm_sdlc     = parametric(16, 0x1021, 0xffff, 0xffff, True,  name='CRC-16/IBM-SDLC')
xmodem       = parametric(16, 0x1021, 0x0000, 0x0000, False, name='CRC-16/XMODEM')
gsm          = parametric(16, 0x1021, 0x0000, 0xffff, False, name='CRC-16/GSM')
spi_fujitsu  = parametric(16, 0x1021, 0x1d0f, 0x0000, False, name='CRC-16/SPI-FUJITSU')
ibm_3740     = parametric(16, 0x1021, 0xffff, 0x0000, False, name='CRC-16/IBM-3740')
genibus      = parametric(16, 0x1021, 0xffff, 0xffff, False, name='CRC-16/GENIBUS')
profibus     = parametric(16, 0x1dcf, 0xffff, 0xffff, False, name='CRC-16/PROFIBUS')     # Alias: CRC-16/IEC-61158-2
opensafety_a = parametric(16, 0x5935, 0x0000, 0x0000, False, name='CRC-16/OPENSAFETY-A')
m17          = parametric(16, 0x5935, 0xffff, 0x0000, False, name='CRC-16/M17')
lj1200       = parametric(16, 0x6f63, 0x0000, 0x0000, False, name='CRC-16/LJ1200')
opensafety_b = parametric(16, 0x755b, 0x0000, 0x0000, False, name='CRC-16/OPENSAFETY-B')
arc          = parametric(16, 0x8005, 0x0000, 0x0000, True,  name='CRC-16/ARC')
maxim_dow    = parametric(16, 0x8005, 0x0000, 0xffff, True,  name='CRC-16/MAXIM-DOW')
modbus       = parametric(16, 0x8005, 0xffff, 0x0000, True,  name='CRC-16/MODBUS')
usb          = parametric(16, 0x8005, 0xffff, 0xffff, True,  name='CRC-16/USB')
umts         = parametric(16, 0x8005, 0x0000, 0x0000, False, name='CRC-16/UMTS')         # Alias: CRC-16/BUYPASS, CRC-16/VERIFONE
dds_110      = parametric(16, 0x8005, 0x800d, 0x0000, False, name='CRC-16/DDS-110')
cms          = parametric(16, 0x8005, 0xffff, 0x0000, False, name='CRC-16/CMS')
t10_dif      = parametric(16, 0x8bb7, 0x0000, 0x0000, False, name='CRC-16/T10-DIF')
teledisk     = parametric(16, 0xa097, 0x0000, 0x0000, False, name='CRC-16/TELEDISK')
cdma2000     = parametric(16, 0xc867, 0xffff, 0x0000, False, name='CRC-16/CDMA2000')

crc16 = arc
bluetooth = kermit
ccitt = kermit
v41_lsb = kermit
v41_msb = xmodem
zmodem = xmodem
aug_ccitt = spi_fujitsu
ccitt_false = ibm_3740  # commonly misidentified as CCITT
autosar = ibm_3740
darc = genibus
b = ibm_sdlc
x25 = ibm_sdlc
maxim = maxim_dow
buypass = umts
