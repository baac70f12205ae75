# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    ENCODING - Methods for encoding and conversion
#    © 2026 October - WalletTestKit Developers
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

import re
import base64
import binascii
from wallettestkit.main import *

_logger = logging.getLogger(__name__)


class EncodingError(Exception):
    """ Log and raise encoding errors """
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


BECH32_CHARSET = b'qpzry9x8gf2tvdw0s3jn54khce6mua7l'

_HEX_RE = re.compile(r'[0-9a-fA-F]+')
_BINARY_RE = re.compile(r'[01]+')


def _codestring_to_array(codestring):
    array = []
    for s in bytes(codestring, 'utf8'):
        try:
            array.append(BECH32_CHARSET.index(s))
        except ValueError:
            raise EncodingError("Character '%s' not found in bech32 charset" % chr(s))
    return array


def hex_to_bytes(hex_string):
    """
    Convert hexadecimal string to raw bytes, every 2 characters form one byte

    >>> hex_to_bytes('a0ff01')
    b'\\xa0\\xff\\x01'

    :param hex_string: Hexadecimal string with an even number of characters
    :type hex_string: str

    :return bytes:
    """
    if not isinstance(hex_string, TYPE_TEXT):
        raise EncodingError("Hexadecimal string expected, got %s" % type(hex_string).__name__)
    if not hex_string:
        return b''
    if len(hex_string) % 2:
        raise EncodingError("Invalid hexadecimal string, odd number of characters: %s" % hex_string)
    if not _HEX_RE.fullmatch(hex_string):
        raise EncodingError("Invalid hexadecimal string, non-hex characters found: %s" % hex_string)
    return bytes.fromhex(hex_string)


def bytes_to_hex(data):
    """
    Dump bytes as hexadecimal string with 2 lowercase characters per byte. Strings are UTF-8 encoded first.

    >>> bytes_to_hex(b'\\x82\\x00\\xa1')
    '8200a1'

    :param data: Raw data, for instance CBOR encoded bytes
    :type data: bytes, bytearray, str

    :return str:
    """
    if isinstance(data, TYPE_TEXT):
        data = data.encode('utf8')
    return ''.join('%02x' % b for b in data)


def binary_to_hex(binary_as_string):
    """
    Convert string of binary digits to hexadecimal, at least 2 characters

    >>> binary_to_hex('1010')
    '0a'

    :param binary_as_string: Binary digits, i.e. '11110001'
    :type binary_as_string: str

    :return str:
    """
    if not isinstance(binary_as_string, TYPE_TEXT) or not _BINARY_RE.fullmatch(binary_as_string):
        raise EncodingError("Invalid binary string: %s" % binary_as_string)
    return '%02x' % int(binary_as_string, 2)


def asset_name_to_hex(asset_name):
    """
    Encode asset name to its hexadecimal representation as used in token policies

    >>> asset_name_to_hex('ab')
    '6162'

    :param asset_name: Asset name
    :type asset_name: str, bytes

    :return str:
    """
    return bytes_to_hex(asset_name)


def is_base64(value):
    """
    Check if value is strict base64: decoding and encoding again must return the same string

    :param value: Value to check
    :type value: any

    :return bool:
    """
    if not isinstance(value, TYPE_TEXT):
        return False
    try:
        return base64.b64encode(base64.b64decode(value)).decode('ascii') == value
    except (binascii.Error, ValueError):
        return False


def is_base16(value):
    """
    Check if value is a non-empty string of hexadecimal characters

    :param value: Value to check
    :type value: any

    :return bool:
    """
    return isinstance(value, TYPE_TEXT) and bool(_HEX_RE.fullmatch(value))


def _bech32_polymod(values):
    """
    Internal function that computes the Bech32 checksum
    """
    generator = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1ffffff) << 5 ^ value
        for i in range(5):
            chk ^= generator[i] if ((top >> i) & 1) else 0
    return chk


def convertbits(data, frombits, tobits, pad=True):
    """
    'General power-of-2 base conversion'

    Source: https://github.com/sipa/bech32/tree/master/ref/python

    :param data: Data values to convert
    :type data: list
    :param frombits: Number of bits in source data
    :type frombits: int
    :param tobits: Number of bits in result data
    :type tobits: int
    :param pad: Use padding zero's or not. Default is True
    :type pad: bool

    :return list: Converted values
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            return None
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits or ((acc << (tobits - bits)) & maxv):
        return None
    return ret


def bech32_decode(bech):
    """
    Decode and verify a bech32 string, i.e. a Cardano extended public key or address.

    Cardano keys are longer than segwit addresses, so the 90 character limit of BIP173 is not enforced.

    >>> bech32_decode('A12UEL5L')
    ('a', b'')

    :param bech: Bech32 encoded string
    :type bech: str

    :return tuple: (human readable part, data bytes)
    """
    if not isinstance(bech, TYPE_TEXT):
        raise EncodingError("Bech32 string expected, got %s" % type(bech).__name__)
    bech = bech.strip()
    if (any(ord(x) < 33 or ord(x) > 126 for x in bech)) or (bech.lower() != bech and bech.upper() != bech):
        raise EncodingError("Invalid bech32 character in bech string")
    bech = bech.lower()
    pos = bech.rfind('1')
    if pos < 1 or pos + 7 > len(bech):
        raise EncodingError("Invalid bech32 string length")
    hrp = bech[:pos]
    data = _codestring_to_array(bech[pos + 1:])
    hrp_expanded = [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]
    if not _bech32_polymod(hrp_expanded + data) == 1:
        raise EncodingError("Bech polymod check failed")
    decoded = convertbits(data[:-6], 5, 8, pad=False)
    if decoded is None:
        raise EncodingError("Invalid bech32 data padding")
    return hrp, bytes(decoded)


def bech32_to_hex(bech):
    """
    Return data part of a bech32 string as hexadecimal string. Native equivalent of piping a key through the
    bech32 command line tool.

    :param bech: Bech32 encoded string
    :type bech: str

    :return str:
    """
    return bytes_to_hex(bech32_decode(bech)[1])


def hex_to_bech32(hrp, hex_string):
    """
    Encode hexadecimal data as bech32 string with given human readable part

    >>> hex_to_bech32('abcdef', '00443214c74254b635cf84653a56d7c675be77df')
    'abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw'

    :param hrp: Human readable part, i.e. 'xpub' or 'addr_test'
    :type hrp: str
    :param hex_string: Data to encode
    :type hex_string: str

    :return str:
    """
    data = convertbits(list(hex_to_bytes(hex_string)), 8, 5)
    hrp_expanded = [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]
    polymod = _bech32_polymod(hrp_expanded + data + [0, 0, 0, 0, 0, 0]) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + '1' + ''.join(chr(BECH32_CHARSET[d]) for d in data + checksum)
