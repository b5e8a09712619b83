#!/usr/bin/python
""" efi variables, read from linux efivarfs or plain files """
import os
import logging

from efiboot.efi import guids
from efiboot.efi import loadopt

EFIVARS_PATH = '/sys/firmware/efi/efivars'


# pylint: disable=too-few-public-methods
class EfiVar:
    """  class for efi variables """

    def __init__(self, name, guid = None, attr = None, data = b''):
        self.name = name
        self.guid = guid
        self.attr = attr
        self.data = data
        if self.guid is None:
            self.guid = guids.parse_str(guids.EfiGlobalVariable)

    def load_option(self):
        """ decode variable data as EFI_LOAD_OPTION """
        return loadopt.decode(self.data)

    def __str__(self):
        attr = 'none' if self.attr is None else f'0x{self.attr:x}'
        return f'{self.name} guid={guids.name(self.guid)} attr={attr} size={len(self.data)}'


def parse_efivarfs(name, blob, guid = None):
    """ efivarfs files start with the 32-bit attributes, data follows """
    if len(blob) < 4:
        raise ValueError(f'{name}: efivarfs data too short ({len(blob)} bytes)')
    attr = int.from_bytes(blob[:4], byteorder='little', signed=False)
    return EfiVar(name, guid = guid, attr = attr, data = blob[4:])


def read_file(filename, efivarfs = False):
    """ read variable data from filename, raw or efivarfs format """
    logging.debug('reading %s', filename)
    with open(filename, 'rb') as f:
        blob = f.read()
    name = os.path.basename(filename)
    if efivarfs:
        return parse_efivarfs(name, blob)
    return EfiVar(name, data = blob)


# pylint: disable=too-few-public-methods
class LinuxVarStore:
    """  class for linux efivarfs varstore """

    def __init__(self, path = EFIVARS_PATH):
        self.path = path

    def filename(self, name, guid = guids.EfiGlobalVariable):
        return os.path.join(self.path, f'{name}-{guid}')

    def get_variable(self, name, guid = guids.EfiGlobalVariable):
        filename = self.filename(name, guid)
        logging.debug('reading %s', filename)
        with open(filename, 'rb') as f:
            blob = f.read()
        return parse_efivarfs(name, blob, guid = guids.parse_str(str(guid)))

    def boot_entry(self, nr):
        """ read and decode BootNNNN """
        var = self.get_variable(f'Boot{nr:04X}')
        return var.load_option()
