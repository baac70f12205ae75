# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    DERIVATION - Derive keys and addresses from mnemonic sentences with cardano-address
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
import shlex
from abc import ABC, abstractmethod
from wallettestkit.main import *
from wallettestkit.shell import cmd

_logger = logging.getLogger(__name__)

_PATH_RE = re.compile(r"^\d+[Hh']?(/\d+[Hh']?)*$")


class DerivationError(Exception):
    """
    Raised for invalid derivation input or when the key derivation tool returns nothing
    """
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


def mnemonic_sentence(mnemonics):
    """
    Join list of mnemonic words to a sentence with single spaces

    >>> mnemonic_sentence(['chunk', 'gun', 'celery'])
    'chunk gun celery'

    :param mnemonics: Mnemonic words, a space separated sentence is accepted as well
    :type mnemonics: list, str

    :return str:
    """
    if isinstance(mnemonics, TYPE_TEXT):
        mnemonics = mnemonics.split()
    words = [str(w).strip() for w in mnemonics or [] if str(w).strip()]
    if not words:
        raise DerivationError("Please provide a mnemonic sentence, no words found")
    return ' '.join(words)


def check_path(path):
    """
    Check derivation path format, i.e. '14H/42H' or "1852'/1815'/0'". Hardened indexes are marked with H, h or '

    :param path: Derivation path
    :type path: str

    :return str: The path
    """
    if not isinstance(path, TYPE_TEXT) or not _PATH_RE.match(path):
        raise DerivationError("Invalid derivation path %s, expected indexes separated by '/', i.e. '14H/42H'" % path)
    return path


def _check_option(value, options, name):
    if value not in options:
        raise DerivationError("Unknown %s %s, supported are: %s" % (name, value, ', '.join(options)))
    return value


class KeyDerivationService(ABC):
    """
    Interface for external key derivation. Use CardanoAddressCli to call the cardano-address tool, or implement a
    stub to run tests without the binaries installed.
    """

    @abstractmethod
    def derive_root_key(self, mnemonics, wallet_type='Byron', chain_code='--with-chain-code'):
        """
        Root extended public key for mnemonic sentence

        :return str: Bech32 encoded root public key
        """

    @abstractmethod
    def derive_child_public_key(self, mnemonics, path, wallet_type='Shared', chain_code='--with-chain-code',
                                hex=False):
        """
        Public key of child at derivation path

        :return str: Bech32 encoded public key, or base16 if hex is True
        """

    @abstractmethod
    def build_address(self, mnemonics, path, root, network_tag=DEFAULT_NETWORK_TAG):
        """
        Bootstrap (Byron) address for child key at derivation path

        :return str: Address
        """

    @abstractmethod
    def bech32_to_base16(self, key):
        """
        Decode bech32 key to base16

        :return str:
        """


class CardanoAddressCli(KeyDerivationService):
    """
    Key derivation with the cardano-address and bech32 command line tools.

    Every method runs its own pipeline and starts again from the recovery phrase, so nothing is kept between
    calls. The mnemonic sentence is passed on standard input.
    """

    def __init__(self, cardano_address=None, bech32=None, display_result=False):
        """
        :param cardano_address: Path or name of cardano-address binary, default from config
        :type cardano_address: str
        :param bech32: Path or name of bech32 binary, default from config
        :type bech32: str
        :param display_result: Log commands and output at INFO level
        :type display_result: bool
        """
        self.cardano_address = cardano_address or CARDANO_ADDRESS_BIN
        self.bech32 = bech32 or BECH32_BIN
        self.display_result = display_result

    def __repr__(self):
        return "<CardanoAddressCli(%s, %s)>" % (self.cardano_address, self.bech32)

    def _run(self, stages, input):
        res = cmd(' | '.join(stages), display_result=self.display_result, input=input + '\n').replace('\n', '')
        if not res:
            raise DerivationError("No output from key derivation command: %s" % ' | '.join(stages))
        return res

    def _from_recovery_phrase(self, wallet_type):
        _check_option(wallet_type, WALLET_STYLES, 'wallet type')
        return '%s key from-recovery-phrase %s' % (self.cardano_address, wallet_type)

    def _key_child(self, path):
        return '%s key child %s' % (self.cardano_address, shlex.quote(check_path(path)))

    def _key_public(self, chain_code):
        _check_option(chain_code, CHAIN_CODE_FLAGS, 'chain code flag')
        return '%s key public %s' % (self.cardano_address, chain_code)

    def derive_root_key(self, mnemonics, wallet_type='Byron', chain_code='--with-chain-code'):
        stages = [self._from_recovery_phrase(wallet_type), self._key_public(chain_code)]
        return self._run(stages, mnemonic_sentence(mnemonics))

    def derive_child_public_key(self, mnemonics, path, wallet_type='Shared', chain_code='--with-chain-code',
                                hex=False):
        stages = [self._from_recovery_phrase(wallet_type), self._key_child(path), self._key_public(chain_code)]
        if hex:
            stages.append(self.bech32)
        return self._run(stages, mnemonic_sentence(mnemonics))

    def build_address(self, mnemonics, path, root, network_tag=DEFAULT_NETWORK_TAG):
        if not root:
            raise DerivationError("Root public key is required to build a bootstrap address")
        stages = [self._from_recovery_phrase('Byron'), self._key_child(path), self._key_public('--with-chain-code'),
                  '%s address bootstrap --root %s --network-tag %s %s' %
                  (self.cardano_address, shlex.quote(root), shlex.quote(str(network_tag)), shlex.quote(path))]
        return self._run(stages, mnemonic_sentence(mnemonics))

    def bech32_to_base16(self, key):
        if not key:
            raise DerivationError("Please provide a bech32 key to decode")
        return self._run([self.bech32], key.strip())


def _service(service):
    return service if service is not None else CardanoAddressCli()


def byron_address(mnemonics, path, service=None):
    """
    Generate Byron address for mnemonic sentence and derivation path on the test network.

    Equivalent of:

    $ cat mnemonics | cardano-address key from-recovery-phrase Byron > root.prv
    $ cat root.prv \\
        | cardano-address key child 14H/42H \\
        | cardano-address key public --with-chain-code \\
        | cardano-address address bootstrap --root $(cat root.prv | cardano-address key public --with-chain-code) \\
            --network-tag testnet 14H/42H

    :param mnemonics: Mnemonic words
    :type mnemonics: list, str
    :param path: Derivation path, i.e. '14H/42H'
    :type path: str
    :param service: Key derivation service, default is CardanoAddressCli
    :type service: KeyDerivationService

    :return str: Bootstrap address
    """
    service = _service(service)
    check_path(path)
    root = service.derive_root_key(mnemonics, 'Byron', '--with-chain-code')
    return service.build_address(mnemonics, path, root, DEFAULT_NETWORK_TAG)


def account_xpub(mnemonics, path, wallet_type='Shared', chain_code='--with-chain-code', hex=True, service=None):
    """
    Get account extended public key for mnemonic sentence

    :param mnemonics: Mnemonic words
    :type mnemonics: list, str
    :param path: Derivation path, i.e. '1854H/1815H/0H'
    :type path: str
    :param wallet_type: Recovery phrase style: Byron, Icarus, Shelley or Shared. Default is Shared
    :type wallet_type: str
    :param chain_code: '--with-chain-code' or '--without-chain-code'
    :type chain_code: str
    :param hex: Return base16 instead of bech32. Default is True
    :type hex: bool
    :param service: Key derivation service, default is CardanoAddressCli
    :type service: KeyDerivationService

    :return str:
    """
    return _service(service).derive_child_public_key(mnemonics, path, wallet_type, chain_code, hex=hex)


def bech32_to_base16(key, service=None):
    return _service(service).bech32_to_base16(key)
