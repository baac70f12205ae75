# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    CONFIG - Configuration settings
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

import os
import configparser
from pathlib import Path

# General defaults
TYPE_TEXT = str
LOGLEVEL = 'WARNING'
WALLETTESTKIT_VERSION = '0.3.1'

# File locations
WTK_CONFIG_FILE = ''
WTK_DATA_DIR = ''
WTK_LOG_FILE = ''

# Logging
ENABLE_WALLETTESTKIT_LOGGING = True
LOG_TO_CONSOLE = False

# Timeouts in seconds, None blocks until the request or command finishes
TIMEOUT_REQUESTS = None
COMMAND_TIMEOUT = None

# Environment variables read by the helpers
ENV_FIXTURES_FILE = 'TESTS_E2E_FIXTURES_FILE'
ENV_NODE_CONFIGS = 'CARDANO_NODE_CONFIGS'

# External tools
CARDANO_ADDRESS_BIN = 'cardano-address'
BECH32_BIN = 'bech32'
DEFAULT_NETWORK_TAG = 'testnet'
WALLET_STYLES = ['Byron', 'Icarus', 'Shelley', 'Shared']
CHAIN_CODE_FLAGS = ['--with-chain-code', '--without-chain-code']

# Fixture wallets
FIXTURE_PLATFORMS = ['linux', 'macos', 'windows']
FIXTURE_KINDS = ['fixture', 'target']
FIXTURE_WALLET_TYPES = ['shelley', 'shared', 'icarus', 'random']

# Remote resources
HYDRA_JOB_URL = 'https://hydra.iohk.io/job/Cardano'
BINARY_DIST_ARTIFACTS = {
    # <platform>: <hydra job artifact>
    'linux': 'linux.musl.cardano-wallet-linux64',
    'macos': 'macos.intel.cardano-wallet-macos-intel',
    'windows': 'linux.windows.cardano-wallet-win64',
}
CONFIGS_BOOK_URL = 'https://book.world.dev.cardano.org/environments/%s/'
CONFIGS_LEGACY_URL = HYDRA_JOB_URL + '/iohk-nix/cardano-deployment/latest/download/1/%s-'
CONFIGS_BOOK_ENVIRONMENTS = ['mainnet', 'testnet', 'preview', 'preprod', 'shelley-qa']
CONFIGS_BOOK_PATTERN = r'vasil-*'
NODE_DB_SNAPSHOT_URLS = {
    'testnet': 'https://updates-cardano-testnet.s3.amazonaws.com/cardano-node-state/db-testnet.tar.gz',
    'mainnet': 'https://update-cardano-mainnet.iohk.io/cardano-node-state/db-mainnet.tar.gz',
}
DOWNLOAD_CHUNK_SIZE = 1024 * 1024

# Genesis
BYRON_GENESIS_FILE = 'byron-genesis.json'


def read_config():
    config = configparser.ConfigParser()

    def config_get(section, var, fallback, is_boolean=False):
        try:
            if is_boolean:
                val = config.getboolean(section, var, fallback=fallback)
            else:
                val = config.get(section, var, fallback=fallback)
            return val
        except (ValueError, configparser.Error):
            return fallback

    def config_timeout(section, var, fallback):
        val = config_get(section, var, fallback)
        if val in (None, '', '0', 'none', 'None'):
            return None
        try:
            return float(val)
        except ValueError:
            return fallback

    global WTK_CONFIG_FILE, WTK_DATA_DIR, WTK_LOG_FILE
    global LOGLEVEL, ENABLE_WALLETTESTKIT_LOGGING, LOG_TO_CONSOLE
    global TIMEOUT_REQUESTS, COMMAND_TIMEOUT, DEFAULT_NETWORK_TAG
    global CARDANO_ADDRESS_BIN, BECH32_BIN

    # Read settings from configuration file provided in OS environment or ~/.wallettestkit/ directory
    config_file_name = os.environ.get('WTK_CONFIG_FILE')
    if not config_file_name:
        WTK_CONFIG_FILE = Path('~/.wallettestkit/config.ini').expanduser()
    else:
        WTK_CONFIG_FILE = Path(config_file_name)
        if not WTK_CONFIG_FILE.is_absolute():
            WTK_CONFIG_FILE = Path(Path.home(), '.wallettestkit', WTK_CONFIG_FILE)
        if not WTK_CONFIG_FILE.exists():
            raise IOError('WalletTestKit configuration file not found: %s' % str(WTK_CONFIG_FILE))
    data = config.read(str(WTK_CONFIG_FILE))
    WTK_DATA_DIR = Path(config_get('locations', 'data_dir', fallback='~/.wallettestkit')).expanduser()

    # Log settings
    ENABLE_WALLETTESTKIT_LOGGING = config_get('logs', 'enable_logging', fallback=True, is_boolean=True)
    WTK_LOG_FILE = Path(WTK_DATA_DIR, config_get('logs', 'log_file', fallback='wallettestkit.log'))
    LOGLEVEL = config_get('logs', 'loglevel', fallback=LOGLEVEL)
    LOG_TO_CONSOLE = config_get('logs', 'log_to_console', fallback=False, is_boolean=True)

    # Timeouts and tools
    TIMEOUT_REQUESTS = config_timeout('common', 'timeout_requests', fallback=TIMEOUT_REQUESTS)
    COMMAND_TIMEOUT = config_timeout('common', 'command_timeout', fallback=COMMAND_TIMEOUT)
    DEFAULT_NETWORK_TAG = config_get('common', 'network_tag', fallback=DEFAULT_NETWORK_TAG)
    CARDANO_ADDRESS_BIN = config_get('tools', 'cardano_address_bin', fallback=CARDANO_ADDRESS_BIN)
    BECH32_BIN = config_get('tools', 'bech32_bin', fallback=BECH32_BIN)

    if not data:
        return False
    return True


# Initialize library
read_config()
