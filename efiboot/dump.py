#!/usr/bin/python
""" print efi load options (BootNNNN variables) """
import sys
import logging
import argparse

from efiboot.efi import guids
from efiboot.efi import ucs16
from efiboot.efi import efivar
from efiboot.efi import loadopt


def format_optdata(optdata):
    if not optdata:
        return ''
    if len(optdata) >= 4 and optdata[0] != 0 and optdata[1] == 0:
        try:
            return f'ucs16: {ucs16.from_ucs16(optdata, 0)}'
        except (ucs16.UnterminatedString, UnicodeDecodeError):
            pass
    if len(optdata) == 16:
        return f'guid: {guids.parse_bin(optdata, 0)}'
    return f'hex: {bytes(optdata).hex()}'


def print_entry(source, entry, verbose):
    flags  = 'A' if entry.active else ' '
    flags += 'H' if entry.hidden else ' '
    print(f'# {flags}  -  {source}  -  {entry.description}')
    if verbose:
        prefix = '#           ->'
        print(f'{prefix} attr: 0x{entry.attributes:08x}')
        if entry.optional_data:
            print(f'{prefix} opt/{format_optdata(entry.optional_data)}')


def dump_var(var, verbose):
    try:
        entry = var.load_option()
    except loadopt.DecodeError as err:
        logging.error('%s: %s', var.name, err)
        return False
    print_entry(var.name, entry, verbose)
    return True


##################################################################################################
# main

def main(argv = None):
    parser = argparse.ArgumentParser(
        description = 'decode and print efi load options')
    parser.add_argument('-l', '--loglevel', dest = 'loglevel', type = str, default = 'info',
                        help = 'set loglevel to LEVEL', metavar = 'LEVEL')
    parser.add_argument('-p', '--path', dest = 'path', type = str,
                        default = efivar.EFIVARS_PATH,
                        help = 'read variables from efivarfs DIR', metavar = 'DIR')
    parser.add_argument('-n', '--name', dest = 'names', type = str, action = 'append',
                        help = 'print variable NAME (e.g. Boot0001), ' +
                        'can be specified multiple times', metavar = 'NAME')
    parser.add_argument('-f', '--file', dest = 'files', type = str, action = 'append',
                        help = 'print load option stored in FILE, ' +
                        'can be specified multiple times', metavar = 'FILE')
    parser.add_argument('--efivarfs', dest = 'efivarfs',
                        action = 'store_true', default = False,
                        help = 'FILE is in efivarfs format (attributes prefix)')
    parser.add_argument('-v', '--verbose', dest = 'verbose',
                        action = 'store_true', default = False,
                        help = 'print attributes and optional data')
    options = parser.parse_args(argv)

    logging.basicConfig(format = '%(levelname)s: %(message)s',
                        level = getattr(logging, options.loglevel.upper()))

    if not options.names and not options.files:
        logging.error('nothing to do (use --name or --file)')
        return 1

    result = 0
    varstore = efivar.LinuxVarStore(options.path)
    for name in options.names or []:
        try:
            var = varstore.get_variable(name)
        except (OSError, ValueError) as err:
            logging.error('%s: %s', name, err)
            result = 1
            continue
        if not dump_var(var, options.verbose):
            result = 1

    for filename in options.files or []:
        try:
            var = efivar.read_file(filename, options.efivarfs)
        except (OSError, ValueError) as err:
            logging.error('%s: %s', filename, err)
            result = 1
            continue
        if not dump_var(var, options.verbose):
            result = 1

    return result

if __name__ == '__main__':
    sys.exit(main())
