# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    GENESIS - Read values from node genesis files
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
from wallettestkit.files import absolute_path

_logger = logging.getLogger(__name__)


class GenesisError(Exception):
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


def node_config_dir(env):
    """
    Directory with node configuration files for environment: $CARDANO_NODE_CONFIGS/<env>

    :param env: Environment name, i.e. 'preprod'
    :type env: str

    :return Path:
    """
    configs = os.environ.get(ENV_NODE_CONFIGS)
    if not configs:
        raise GenesisError("Environment variable %s with node configuration directory not set" % ENV_NODE_CONFIGS)
    return Path(absolute_path(configs), env)


def protocol_magic(env):
    """
    Get protocol magic from byron-genesis.json of environment

    :param env: Environment name, i.e. 'preprod'
    :type env: str

    :return int:
    """
    fn = Path(node_config_dir(env), BYRON_GENESIS_FILE)
    if not fn.is_file():
        raise GenesisError("Genesis file %s not found" % fn)
    with fn.open(encoding='utf8') as f:
        try:
            byron_genesis = json.load(f)
        except json.decoder.JSONDecodeError as e:
            raise GenesisError("Error reading genesis file %s: %s" % (fn, e))
    try:
        return int(byron_genesis['protocolConsts']['protocolMagic'])
    except (KeyError, TypeError, ValueError):
        raise GenesisError("No valid protocolConsts.protocolMagic found in %s" % fn)
