# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    FIXTURES - Mnemonics of fixture and target wallets used by the end-to-end tests
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

import json
from wallettestkit.main import *
from wallettestkit.platforms import Platform, current_platform

_logger = logging.getLogger(__name__)


class FixtureError(Exception):
    """
    Fixture file Exception class
    """
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


def _fixture_file_hint(filename):
    return "File %s does not exist! (Hint: Template fixture file can be created with " \
           "'wallettestkit.fixtures.write_fixture_template'). Make sure to feed it with mnemonics of wallets " \
           "with funds and assets." % filename


class FixtureWallets(object):
    """
    Fixture document with wallet mnemonics, structured as platform -> kind -> wallet type -> list of words.

    The kind is 'fixture' for wallets with funds and assets or 'target' for wallets receiving them. Wallet types are
    'shelley', 'shared', 'icarus' and 'random'. The document is validated when loaded and never modified.
    """

    def __init__(self, wallets, filename=None):
        """
        :param wallets: Parsed fixture document
        :type wallets: dict
        :param filename: File the document was read from, used in error messages
        :type filename: str
        """
        self.filename = filename
        self.wallets = self._validate(wallets)

    def __repr__(self):
        return "<FixtureWallets(%s)>" % self.filename

    @classmethod
    def load(cls, filename=None):
        """
        Read fixture document from file. The file name defaults to the TESTS_E2E_FIXTURES_FILE environment variable.

        :param filename: Path to fixture json file
        :type filename: str, Path

        :return FixtureWallets:
        """
        if filename is None:
            filename = os.environ.get(ENV_FIXTURES_FILE)
        if not filename or not Path(filename).is_file():
            raise FixtureError(_fixture_file_hint(filename))
        _logger.info("Reading fixture wallets from %s" % filename)
        with Path(filename).open(encoding='utf8') as f:
            try:
                wallets = json.load(f)
            except json.decoder.JSONDecodeError as e:
                raise FixtureError("Error reading fixture wallets from %s: %s" % (filename, e))
        return cls(wallets, str(filename))

    def _validate(self, wallets):
        def check_mapping(value, key_path):
            if not isinstance(value, dict):
                raise FixtureError("Invalid fixture file %s: expected object at '%s', found %s" %
                                   (self.filename, '/'.join(key_path) or '/', type(value).__name__))

        check_mapping(wallets, [])
        for platform, kinds in wallets.items():
            check_mapping(kinds, [platform])
            for kind, types in kinds.items():
                check_mapping(types, [platform, kind])
                for wallet_type, words in types.items():
                    if not isinstance(words, list) or not all(isinstance(w, TYPE_TEXT) for w in words):
                        raise FixtureError("Invalid fixture file %s: expected list of words at '%s'" %
                                           (self.filename, '/'.join([platform, kind, wallet_type])))
        return wallets

    def mnemonics(self, kind, wallet_type, platform=None):
        """
        Get mnemonic words of a fixture wallet for the current or given platform

        :param kind: 'fixture' or 'target'
        :type kind: str
        :param wallet_type: 'shelley', 'shared', 'icarus' or 'random'
        :type wallet_type: str
        :param platform: Platform or its name, default is the platform the tests run on
        :type platform: Platform, str

        :return list: Mnemonic words
        """
        platform = current_platform() if platform is None else Platform.parse(platform)
        key_path = [platform.value, str(kind), str(wallet_type)]
        node = self.wallets
        for i, key in enumerate(key_path):
            if key not in node:
                raise FixtureError("Key '%s' not found in fixture file %s (key path %s)" %
                                   (key, self.filename, '/'.join(key_path[:i + 1])))
            node = node[key]
        return node


def fixture_wallet_mnemonics(kind, wallet_type, platform=None):
    """
    Get wallet mnemonics from the fixtures file in TESTS_E2E_FIXTURES_FILE. The file is read on every call.

    :param kind: 'fixture' (wallet with funds) or 'target' (wallet receiving funds)
    :type kind: str
    :param wallet_type: 'shelley', 'shared', 'icarus' or 'random'
    :type wallet_type: str
    :param platform: Platform or its name, default is the platform the tests run on
    :type platform: Platform, str

    :return list:
    """
    return FixtureWallets.load().mnemonics(kind, wallet_type, platform)


def write_fixture_template(filename=None):
    """
    Write a fixture file with empty mnemonic lists for every platform, kind and wallet type. Refuses to overwrite an
    existing file.

    :param filename: Path of the new file, default is TESTS_E2E_FIXTURES_FILE
    :type filename: str, Path

    :return Path:
    """
    if filename is None:
        filename = os.environ.get(ENV_FIXTURES_FILE)
    if not filename:
        raise FixtureError("Please specify a file name or set %s" % ENV_FIXTURES_FILE)
    filename = Path(filename)
    if filename.exists():
        raise FixtureError("Fixture file %s already exists, remove it first to create a new template" % filename)
    template = {p: {k: {t: [] for t in FIXTURE_WALLET_TYPES} for k in FIXTURE_KINDS} for p in FIXTURE_PLATFORMS}
    filename.parent.mkdir(parents=True, exist_ok=True)
    with filename.open('w', encoding='utf8') as f:
        json.dump(template, f, indent=2)
    _logger.info("Fixture template written to %s" % filename)
    return filename
