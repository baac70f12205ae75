# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    PLATFORMS - Detect the operating system the tests run on
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

import enum
import functools
from wallettestkit.main import *

_logger = logging.getLogger(__name__)


class PlatformError(Exception):
    """
    Platform Exception class
    """
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


class Platform(enum.Enum):
    """
    Operating systems supported by the wallet test suite. The value is the name used as key in fixture files.
    """

    LINUX = 'linux'
    MACOS = 'macos'
    WINDOWS = 'windows'

    @classmethod
    def detect(cls, platform_string=None):
        """
        Map a sys.platform style string to a Platform

        >>> Platform.detect('darwin')
        <Platform.MACOS: 'macos'>

        :param platform_string: Platform string, leave empty to use sys.platform
        :type platform_string: str

        :return Platform:
        """
        if platform_string is None:
            platform_string = sys.platform
        name = platform_string.lower()
        if name.startswith('linux'):
            return cls.LINUX
        elif name.startswith('darwin'):
            return cls.MACOS
        elif name.startswith(('win', 'cygwin', 'msys', 'mingw')):
            return cls.WINDOWS
        raise PlatformError("Unsupported platform!")

    @classmethod
    def parse(cls, platform):
        """
        Return Platform for a Platform member or its name, i.e. 'linux'

        :param platform: Platform or platform name
        :type platform: Platform, str

        :return Platform:
        """
        if isinstance(platform, cls):
            return platform
        try:
            return cls(str(platform).lower())
        except ValueError:
            raise PlatformError("Unsupported platform %s, supported are: %s" %
                                (platform, ', '.join(p.value for p in cls)))


@functools.lru_cache(maxsize=None)
def current_platform():
    """
    Platform of this process, detected on first call and reused afterwards

    :return Platform:
    """
    platform = Platform.detect()
    _logger.debug("Detected platform %s" % platform.value)
    return platform


def is_linux():
    return current_platform() is Platform.LINUX


def is_mac():
    return current_platform() is Platform.MACOS


def is_windows():
    return current_platform() is Platform.WINDOWS
