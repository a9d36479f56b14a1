# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
"""
Command line CRC calculator.

    $ echo -n 123456789 | python3 -m parametric_crc -c CRC-32/ISO-HDLC
    CRC-32/ISO-HDLC width=32 poly=0x04c11db7 init=0xffffffff refin=true refout=true xorout=0xffffffff
    number of bytes processed: 9
    crc: 0xcbf43926

Use --list to test all builtin CRC algorithms against the reference values of
the catalogue.

The example below shows how to use --residue-const and --residue. The CRC
catalogue of the RevEng project mentions codeword examples when the
documentation of a CRC algorithm provides some:
https://reveng.sourceforge.io/crc-catalogue/all.htm
This is a codeword provided for the CRC-32/CASTAGNOLI algorithm:
000102030405060708090A0B0C0D0E0F101112131415161718191A1B1C1D1E1F4E79DD46

    $ python3 -m parametric_crc -qc CRC-32/CASTAGNOLI --residue-const
    0xb798b438

    $ echo '000102030405060708090A0B0C0D0E0F101112131415161718191A1B1C1D1E1F4E79DD46' \\
           | python3 -m parametric_crc -qc CRC-32/CASTAGNOLI -i hex --residue
    0xb798b438
"""
import argparse
import logging
import re
import sys

from .catalogue import CRC_CATALOGUE, CRC_PARAMS
from .config import CrcConfig, parse_crc_params
from .engine import crc_type
from .residue import residue_const_naive
from .updaters import MODES

logger = logging.getLogger(__name__)

CHECK_INPUT = b'123456789'


def _test_crc(name, width, poly, init, xorout, refin, refout, check, residue,
              alias=(), verbose=True):
    cfg = CrcConfig(width, poly, init, xorout, refin, refout)
    if verbose:
        print('{:25s} {}'.format(name, cfg))
        print('{:25s} expected:    check=0x{:0{w}x} residue=0x{:0{w}x}'.format(
            '', check, residue, w=cfg.hex_digits))
        if alias:
            print('{:25s} aliases:     {}'.format('', ', '.join(alias)))

    ok = True
    for ref_reg in (False, True):
        for mode in MODES:
            t = crc_type(cfg.with_ref_reg(ref_reg), mode, name)
            table = t.create_table() if t.updater.external else None
            label = '{} ref_reg={}'.format(mode, str(ref_reg).lower())

            crc_1 = t.calculate(CHECK_INPUT, table)

            # Calculating the same CRC by feeding in the data in smaller
            # chunks including zero-sized chunks.
            crc_obj = t()
            for chunk in (b'', b'1', b'234', b'', b'56', b'789', b''):
                crc_obj.update(chunk, table)
            crc_2 = t(crc_obj.interim()).final()

            residue_1 = t.residue_const
            codeword = CHECK_INPUT + crc_obj.final_bytes()
            residue_2 = t().update(codeword, table).residue()

            if crc_1 != crc_2:
                print('{:25s} {}: chunked CRC calculation failed.'.format('', label))
                ok = False
            elif crc_1 != check:
                print('{:25s} {}: CRC 0x{:0{w}x} doesn\'t match the reference "check" value.'.format(
                    '', label, crc_1, w=cfg.hex_digits))
                ok = False
            elif residue_1 != residue_2:
                print('{:25s} {}: the residue calculations returned conflicting results.'.format('', label))
                ok = False
            elif residue_1 != residue:
                print('{:25s} {}: the residue 0x{:0{w}x} does not match the reference constant.'.format(
                    '', label, residue_1, w=cfg.hex_digits))
                ok = False
            elif not t.updater.external and residue_const_naive(t, b'hope it works...') != residue:
                print('{:25s} {}: the naive residue calculation failed.'.format('', label))
                ok = False
    return ok


def _test_and_list_catalogue_entries(crc_catalogue, verbose=True):
    passed, failed = [], []
    for entry in crc_catalogue:
        if _test_crc(verbose=verbose, **entry):
            passed.append(entry['name'])
        else:
            failed.append(entry['name'])
    if failed:
        print('Failed CRCs: ' + ', '.join(failed))
    print('Number of failed CRC algorithms: %s' % len(failed))
    print('Number of CRC algorithms that passed the test: %s' % len(passed))
    return not failed


def _input_iterator_hex(infile, lsb_input, max_chunk_size=16*1024):
    """ Yields bytes parsed from hex digits. lsb_input: the least significant
    nibble of each byte comes first. """
    p_space = re.compile(rb'\s+')
    p_hex = re.compile(rb'^[0-9a-fA-F]*$')

    # an odd number of nibbles leaves half a byte for the next chunk
    leftover = b''
    while 1:
        chunk = infile.read(max_chunk_size)
        if not chunk:
            break
        chunk = p_space.sub(b'', chunk)
        if not p_hex.match(chunk):
            raise ValueError('invalid input character - '
                             'allowed characters: hex digits, whitespace')
        chunk = leftover + chunk
        leftover = b''
        if len(chunk) & 1:
            leftover, chunk = chunk[-1:], chunk[:-1]
        if not chunk:
            continue
        if lsb_input:  # reversing the nibbles in each byte
            chunk = b''.join(chunk[i:i+2][::-1] for i in range(0, len(chunk), 2))
        yield bytes.fromhex(chunk.decode('ascii'))

    if leftover:
        raise ValueError('unconsumed nibble at the end of input stream: '
                         + leftover.decode('ascii'))


def _input_iterator(infile, input_format):
    if input_format in ('hex', 'lsb_hex'):
        yield from _input_iterator_hex(infile, input_format == 'lsb_hex')
        return

    assert input_format == 'binary'
    MAX_CHUNK_SIZE = 128 * 1024
    while 1:
        chunk = infile.read(MAX_CHUNK_SIZE)
        if not chunk:
            break
        yield chunk


def _get_crc_type(args):
    name_or_params = args.crc.strip()
    custom_prefix = 'custom:'
    if name_or_params.lower().startswith(custom_prefix):
        try:
            p = parse_crc_params(name_or_params[len(custom_prefix):].strip())
        except ValueError as ex:
            raise ValueError('invalid "CUSTOM:" CRC parameters: %s' % ex) from ex
        name = 'CUSTOM'
    else:
        p = CRC_PARAMS.get(name_or_params.upper())
        if p is None:
            raise ValueError('invalid CRC algorithm name: %r' % name_or_params)
        name = p['name']
    return crc_type(CrcConfig.from_params(p, args.ref_reg), args.mode, name)


def _calc_crc(args):
    t = _get_crc_type(args)
    cfg = t.cfg
    w = cfg.hex_digits

    if not args.quiet:
        print('{} {}'.format(t.name, cfg))

    if args.format == '0xhex':
        fmt_str = '0x{:0{w}x}'
    elif args.format == 'hex':
        fmt_str = '{:0{w}x}'
    else:
        fmt_str = '{!r}'

    if args.residue_const:
        fmt_str = fmt_str if args.quiet else 'residue constant: ' + fmt_str
        print(fmt_str.format(t.residue_const, w=w))
        return

    table = t.create_table() if t.updater.external else None
    crc_obj = t(args.continue_from)
    bytes_processed = 0
    max_input_bytes = args.max_input_bytes
    for chunk in _input_iterator(args.infile, args.input_format):
        if max_input_bytes is not None:
            if max_input_bytes <= 0:
                break
            chunk = chunk[:max_input_bytes]
            max_input_bytes -= len(chunk)
        crc_obj.update(chunk, table)
        bytes_processed += len(chunk)
    logger.debug('%s: processed %d byte(s) in %s mode', t.name, bytes_processed, t.mode)

    if args.interim_remainder:
        v, label = crc_obj.interim(), 'interim remainder: '
    elif args.residue:
        v, label = crc_obj.residue(), 'residue: '
    else:
        v, label = crc_obj.final(), 'crc: '
    if not args.quiet:
        print('number of bytes processed: %s' % bytes_processed)
        fmt_str = label + fmt_str
    print(fmt_str.format(v, w=w))


def _parse_bool(s):
    if s.lower() not in ('true', 'false'):
        raise argparse.ArgumentTypeError('invalid bool value: %r' % s)
    return s.lower() == 'true'


def _arg_parser():
    p = argparse.ArgumentParser(prog='parametric_crc', description='Parametric CRC calculator.')
    auto_int = lambda s: int(s, 0)
    p.add_argument('-l', '--list', action='store_true', help=
                   'list and test all builtin CRC algorithms')
    p.add_argument('--residue-const', action='store_true', help=
                   'calculate the residue constant for the specified CRC '
                   'algorithm (this requires no input data)')
    p.add_argument('--residue', action='store_true', help=
                   'output the residue instead of the final CRC '
                   '(skip the xorout step)')
    p.add_argument('-c', '--crc', help='the name of the CRC algorithm or'
                   ' "CUSTOM: width=X poly=Y ..."')
    p.add_argument('-r', '--interim-remainder', action='store_true', help=
                   'output an interim remainder instead of the final CRC')
    p.add_argument('-k', '--continue-from', type=auto_int, help='continue CRC '
                   'calculation from the specified interim remainder (it has '
                   'to come from the same algorithm, mode and --ref-reg)')
    p.add_argument('-i', '--input-format', choices=['binary', 'hex', 'lsb_hex'],
                   default='binary', help='input data format')
    p.add_argument('-m', '--max-input-bytes', type=auto_int, help=
                   'maximum number of bytes to process from the input')
    p.add_argument('-f', '--format', choices=['0xhex', 'hex', 'decimal'],
                   default='0xhex', help='output format of the crc, residue, '
                   'residue constant or interim remainder')
    p.add_argument('--mode', choices=list(MODES), default='table_based', help=
                   'CRC update mode')
    p.add_argument('--ref-reg', type=_parse_bool, help='reflected CRC shift '
                   'register (true or false), default: the refin parameter')
    p.add_argument('-q', '--quiet', action='store_true', help=
                   'output only the result of the calculation')
    p.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    p.add_argument('infile', nargs='?', type=argparse.FileType('rb'), help=
                   'name of the input file, default: stdin', default=sys.stdin)
    return p


def main(argv=None):
    p = _arg_parser()
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if sum((args.interim_remainder, args.residue_const, args.residue)) > 1:
        print('You can use at most one of the following parameters: '
              '--interim-remainder, --residue-const, --residue', file=sys.stderr)
        return 2

    # argparse opens "-" as sys.stdin.buffer
    from_stdin = args.infile is sys.stdin or args.infile is getattr(sys.stdin, 'buffer', None)
    if args.infile is sys.stdin:
        args.infile = sys.stdin.buffer  # we want to read binary data not strings

    try:
        if args.list:
            return 0 if _test_and_list_catalogue_entries(CRC_CATALOGUE, not args.quiet) else 1

        if args.crc:
            try:
                _calc_crc(args)
                return 0
            except ValueError as ex:
                print('error: %s' % ex, file=sys.stderr)
                return 1

        p.print_help()
        return 2
    finally:
        if not from_stdin:
            args.infile.close()


if __name__ == '__main__':
    sys.exit(main())
