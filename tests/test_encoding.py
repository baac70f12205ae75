# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    Unit Tests for Encoding methods
#    © 2026 October - WalletTestKit Developers
#

import base64
import os
import unittest

from wallettestkit.encoding import *
from wallettestkit.encoding import _bech32_polymod, _codestring_to_array


class TestEncodingHex(unittest.TestCase):

    def test_hex_to_bytes(self):
        self.assertEqual(b'\xa0\xff\x01', hex_to_bytes('a0ff01'))
        self.assertEqual(b'\xa0\xff\x01', hex_to_bytes('A0FF01'))

    def test_hex_to_bytes_empty(self):
        self.assertEqual(b'', hex_to_bytes(''))

    def test_hex_to_bytes_odd_length(self):
        self.assertRaisesRegex(EncodingError, "odd number of characters", hex_to_bytes, 'a0f')

    def test_hex_to_bytes_invalid_characters(self):
        self.assertRaisesRegex(EncodingError, "non-hex characters found", hex_to_bytes, '1a2g')
        self.assertRaisesRegex(EncodingError, "non-hex characters found", hex_to_bytes, 'a0 f')
        self.assertRaisesRegex(EncodingError, "non-hex characters found", hex_to_bytes, '0a1\n')
        self.assertRaisesRegex(EncodingError, "Hexadecimal string expected", hex_to_bytes, b'a0')

    def test_bytes_to_hex(self):
        self.assertEqual('8200a1', bytes_to_hex(b'\x82\x00\xa1'))
        self.assertEqual('000f10ff', bytes_to_hex(bytearray([0, 15, 16, 255])))
        self.assertEqual('', bytes_to_hex(b''))

    def test_bytes_to_hex_string_input(self):
        self.assertEqual('6869', bytes_to_hex('hi'))

    def test_hex_bytes_roundtrip(self):
        for data in [b'', b'\x00', bytes(range(256)), os.urandom(64)]:
            self.assertEqual(data, hex_to_bytes(bytes_to_hex(data)))


class TestEncodingConversions(unittest.TestCase):

    def test_binary_to_hex(self):
        self.assertEqual('0a', binary_to_hex('1010'))
        self.assertEqual('ff', binary_to_hex('11111111'))
        self.assertEqual('00', binary_to_hex('0'))
        self.assertEqual('1ff', binary_to_hex('111111111'))

    def test_binary_to_hex_invalid(self):
        self.assertRaisesRegex(EncodingError, "Invalid binary string", binary_to_hex, '102')
        self.assertRaisesRegex(EncodingError, "Invalid binary string", binary_to_hex, '')
        self.assertRaisesRegex(EncodingError, "Invalid binary string", binary_to_hex, '1010\n')

    def test_asset_name_to_hex(self):
        self.assertEqual('6162', asset_name_to_hex('ab'))
        self.assertEqual('', asset_name_to_hex(''))
        self.assertEqual('e282ac', asset_name_to_hex('€'))
        self.assertEqual('6162', asset_name_to_hex(b'ab'))


class TestEncodingChecks(unittest.TestCase):

    def test_is_base64(self):
        for data in [b'', b'a', b'ab', b'abc', os.urandom(33)]:
            self.assertTrue(is_base64(base64.b64encode(data).decode()))

    def test_is_base64_invalid(self):
        self.assertFalse(is_base64('abc!'))
        self.assertFalse(is_base64('not base64!'))
        self.assertFalse(is_base64('YWJj\n'))
        self.assertFalse(is_base64('YQ'))
        self.assertFalse(is_base64(b'YWJj'))
        self.assertFalse(is_base64(None))

    def test_is_base16(self):
        self.assertTrue(is_base16('1a2b3c'))
        self.assertTrue(is_base16('ABCDEF0123'))
        self.assertTrue(is_base16('a'))

    def test_is_base16_invalid(self):
        self.assertFalse(is_base16('1a2g'))
        self.assertFalse(is_base16(''))
        self.assertFalse(is_base16('1a 2b'))
        self.assertFalse(is_base16('1a2b\n'))
        self.assertFalse(is_base16(123))


VALID_CHECKSUM = [
    "A12UEL5L",
    "an83characterlonghumanreadablepartthatcontainsthenumber1andtheexcludedcharactersbio1tt5tgs",
    "abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw",
    "11qqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqc8247j",
    "split1checkupstagehandshakeupstreamerranterredcaperred2y9e3w",
]

INVALID_BECH32 = [
    " 1nwldj5",
    "\x7F" + "1axkwrx",
    "pzry9x0s0muk",
    "1pzry9x0s0muk",
    "x1b4n0q5v",
    "li1dgmt3",
    "de1lg7wt\xff",
    "abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxx",
    "Abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw",
]


class TestEncodingBech32(unittest.TestCase):
    """
    Bech32 checksum vectors from https://github.com/sipa/bech32/tree/master/ref/python
    """

    def test_valid_checksum(self):
        for test in VALID_CHECKSUM:
            test = test.lower()
            pos = test.rfind('1')
            hrp = test[:pos]
            data = _codestring_to_array(test[pos + 1:])
            hrp_expanded = [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]
            self.assertEqual(_bech32_polymod(hrp_expanded + data), 1, msg="Invalid checksum for %s" % test)

    def test_bech32_decode(self):
        self.assertEqual(('a', b''), bech32_decode('A12UEL5L'))
        hrp, data = bech32_decode('abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw')
        self.assertEqual('abcdef', hrp)
        self.assertEqual('00443214c74254b635cf84653a56d7c675be77df', data.hex())

    def test_bech32_decode_strips_newline(self):
        self.assertEqual(('a', b''), bech32_decode('a12uel5l\n'))

    def test_bech32_decode_invalid(self):
        for test in INVALID_BECH32:
            self.assertRaises(EncodingError, bech32_decode, test)
        self.assertRaisesRegex(EncodingError, "Bech32 string expected", bech32_decode, None)

    def test_bech32_to_hex(self):
        self.assertEqual('00443214c74254b635cf84653a56d7c675be77df',
                         bech32_to_hex('abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw'))

    def test_hex_to_bech32(self):
        self.assertEqual('abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw',
                         hex_to_bech32('abcdef', '00443214c74254b635cf84653a56d7c675be77df'))

    def test_bech32_long_key(self):
        # Extended public keys are 64 bytes, longer than the BIP173 limit of 90 characters
        xpub_hex = bytes_to_hex(bytes(range(64)))
        xpub = hex_to_bech32('acct_shared_xvk', xpub_hex)
        self.assertGreater(len(xpub), 90)
        self.assertEqual(xpub_hex, bech32_to_hex(xpub))

    def test_convertbits(self):
        self.assertEqual([0, 4], convertbits([1], 8, 5))
        self.assertIsNone(convertbits([1], 8, 5, pad=False))
        self.assertIsNone(convertbits([256], 8, 5))


if __name__ == '__main__':
    unittest.main()
