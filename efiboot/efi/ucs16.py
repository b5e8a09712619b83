#!/usr/bin/python
""" efi ucs-16 encoding and decoding """


class UnterminatedString(ValueError):
    """ ran out of data before the terminating 0 """

    def __init__(self, offset, available):
        super().__init__(f'no terminating 0 found in {available} bytes '
                         f'starting at offset {offset}')
        self.offset = offset
        self.available = available


class StringUCS16:
    """ class reprsenting an efi ucs16 string """

    def __init__(self, string = None):
        self.data = b''
        if string:
            self.parse_str(string)

    def parse_bin(self, data, offset):
        """
        set StringUCS16 from bytes data, reads to terminating 0

        Raises UnterminatedString when data ends before a complete
        zero code unit was found.
        """
        pos = offset
        end = len(data)
        while pos + 2 <= end:
            if data[pos] == 0 and data[pos + 1] == 0:
                self.data = bytes(data[offset : pos])
                return
            pos += 2
        raise UnterminatedString(offset, max(end - offset, 0))

    def parse_str(self, string):
        """ set StringUCS16 from python string """
        self.data = string.encode('utf-16le')

    def __bytes__(self):
        """ return bytes representing StringUCS16, with termianting 0 """
        return self.data + b'\0\0'

    def size(self):
        """ number of bytes returned by bytes() """
        return len(self.data) + 2

    def __str__(self):
        # strict, unpaired surrogates raise UnicodeDecodeError
        return self.data.decode('utf-16le')

    def __repr__(self):
        return f"{self.__class__.__name__}('{str(self)}')"

def from_ucs16(data, offset = 0):
    """ convert ucs-16 bytes to StringUCS16 """
    obj = StringUCS16()
    obj.parse_bin(data, offset)
    return obj

def from_string(string):
    """ convert python string to StringUCS16 """
    return StringUCS16(string)
