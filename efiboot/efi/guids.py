#!/usr/bin/python
""" efi guid constants and helper functions """

import uuid

EfiGlobalVariable            = "8be4df61-93ca-11d2-aa0d-00e098032b8c"

name_table = {
    EfiGlobalVariable            : "EfiGlobalVariable",
}

def name(guid):
    nstr = name_table.get(str(guid), None)
    if nstr is None:
        return str(guid)
    return f'guid:{nstr}'

def from_name(nstr):
    if nstr.startswith('guid:'):
        nstr = nstr.replace('guid:', '', 1)
    for (u, n) in name_table.items():
        if n.upper() == nstr.upper():
            return u
    return None

def parse_bin(data, offset):
    return uuid.UUID(bytes_le = bytes(data[offset:offset+16]))

def parse_str(nstr):
    try:
        return uuid.UUID(f'urn:uuid:{nstr}')
    except ValueError:
        pass
    ustr = from_name(nstr)
    if ustr is None:
        raise ValueError(f'unknown guid: {nstr}')
    return uuid.UUID(f'urn:uuid:{ustr}')
