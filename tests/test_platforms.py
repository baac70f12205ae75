# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    Unit Tests for Platform detection
#    © 2026 October - WalletTestKit Developers
#

import unittest
from unittest import mock

from wallettestkit.platforms import *


class TestPlatformDetect(unittest.TestCase):

    def test_platform_detect(self):
        self.assertEqual(Platform.LINUX, Platform.detect('linux'))
        self.assertEqual(Platform.LINUX, Platform.detect('linux2'))
        self.assertEqual(Platform.MACOS, Platform.detect('darwin'))
        self.assertEqual(Platform.WINDOWS, Platform.detect('win32'))
        self.assertEqual(Platform.WINDOWS, Platform.detect('cygwin'))
        self.assertEqual(Platform.WINDOWS, Platform.detect('msys'))

    def test_platform_detect_unsupported(self):
        self.assertRaisesRegex(PlatformError, "Unsupported platform!", Platform.detect, 'freebsd13')
        self.assertRaisesRegex(PlatformError, "Unsupported platform!", Platform.detect, 'aix')

    def test_platform_parse(self):
        self.assertEqual(Platform.MACOS, Platform.parse('macos'))
        self.assertEqual(Platform.WINDOWS, Platform.parse('Windows'))
        self.assertEqual(Platform.LINUX, Platform.parse(Platform.LINUX))
        self.assertRaisesRegex(PlatformError, "Unsupported platform solaris", Platform.parse, 'solaris')


class TestCurrentPlatform(unittest.TestCase):

    def setUp(self):
        current_platform.cache_clear()
        self.addCleanup(current_platform.cache_clear)

    def test_current_platform_resolved_once(self):
        with mock.patch('sys.platform', 'darwin'):
            self.assertEqual(Platform.MACOS, current_platform())
        with mock.patch('sys.platform', 'linux'):
            self.assertEqual(Platform.MACOS, current_platform())
            self.assertTrue(is_mac())
            self.assertFalse(is_linux())
            self.assertFalse(is_windows())

    def test_current_platform_windows(self):
        with mock.patch('sys.platform', 'win32'):
            self.assertTrue(is_windows())

    def test_current_platform_unsupported(self):
        with mock.patch('sys.platform', 'sunos5'):
            self.assertRaises(PlatformError, current_platform)


if __name__ == '__main__':
    unittest.main()
