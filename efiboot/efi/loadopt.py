#!/usr/bin/python
"""
load option decoder

EFI_LOAD_OPTION (UEFI spec, section 3.1.3)

  UINT32   Attributes
  UINT16   FilePathListLength
  CHAR16   Description[]           zero terminated
  UINT8    FilePathList[]          FilePathListLength bytes, skipped
  UINT8    OptionalData[]          everything up to the end

All integers are little endian.
"""

import struct
import logging
import collections

from efiboot.efi import ucs16


LOAD_OPTION_ACTIVE           = 0x00000001
LOAD_OPTION_FORCE_RECONNECT  = 0x00000002
LOAD_OPTION_HIDDEN           = 0x00000008

LOAD_OPTION_CATEGORY         = 0x00001F00
LOAD_OPTION_CATEGORY_BOOT    = 0x00000000
LOAD_OPTION_CATEGORY_APP     = 0x00000100

HEADER_SIZE = 6


##################################################################################################
# errors

class DecodeError(ValueError):
    """ base class for load option decode failures """


class HeaderReadError(DecodeError):
    """ not enough data for attributes or file path list length """

    def __init__(self, field, needed, available):
        super().__init__(f'{field}: need {needed} bytes, have {available}')
        self.field = field
        self.needed = needed
        self.available = available


class DescriptionReadError(DecodeError):
    """ data ends before the description terminator """

    def __init__(self, offset, available):
        super().__init__(f'description reading: no terminating 0 in {available} bytes '
                         f'at offset {offset}')
        self.offset = offset
        self.available = available


class DescriptionTextError(DecodeError):
    """ description is not valid utf-16 """

    def __init__(self, reason):
        super().__init__(f'description parsing: {reason}')
        self.reason = reason


class TrailerRangeError(DecodeError):
    """ file path list runs past the end of data """

    def __init__(self, start, available):
        super().__init__(f'file path list: optional data would start at offset {start}, '
                         f'data has only {available} bytes')
        self.start = start
        self.available = available


##################################################################################################
# load option

class LoadOption(collections.namedtuple('LoadOption',
                                        ('attributes', 'description', 'optional_data'))):
    """ class reprsenting a decoded efi load option, immutable """

    __slots__ = ()

    @classmethod
    def decode(cls, data):
        return decode(data)

    @property
    def active(self):
        return bool(self.attributes & LOAD_OPTION_ACTIVE)

    @property
    def hidden(self):
        return bool(self.attributes & LOAD_OPTION_HIDDEN)

    @property
    def force_reconnect(self):
        return bool(self.attributes & LOAD_OPTION_FORCE_RECONNECT)

    @property
    def category(self):
        return self.attributes & LOAD_OPTION_CATEGORY

    def __str__(self):
        string = f'title="{self.description}" attr=0x{self.attributes:x}'
        if self.optional_data:
            string += f' optdata={self.optional_data.hex()}'
        return string


def _read_header(data):
    if len(data) < 4:
        raise HeaderReadError('attributes', 4, len(data))
    try:
        (attr, pathsize) = struct.unpack_from('<LH', data)
    except struct.error as err:
        raise HeaderReadError('file path list length', HEADER_SIZE, len(data)) from err
    return (attr, pathsize)


def decode(data):
    """
    Decode an EFI_LOAD_OPTION blob.

    Returns a LoadOption, raises a DecodeError subclass on malformed
    input.  The device path list is skipped, only its length is used.
    """
    (attr, pathsize) = _read_header(data)

    try:
        title = ucs16.from_ucs16(data, HEADER_SIZE)
    except ucs16.UnterminatedString as err:
        raise DescriptionReadError(err.offset, err.available) from err
    try:
        description = str(title)
    except UnicodeDecodeError as err:
        raise DescriptionTextError(err.reason) from err

    pathstart = HEADER_SIZE + title.size()
    optstart = pathstart + pathsize
    if optstart > len(data):
        raise TrailerRangeError(optstart, len(data))
    optdata = bytes(data[ optstart : ])

    logging.debug('load option: attr=0x%x title="%s" pathsize=%d optsize=%d',
                  attr, description, pathsize, len(optdata))
    return LoadOption(attr, description, optdata)
