# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    RESOURCES - Locate and download wallet binaries, node configs and node-db snapshots
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
import requests
from urllib.parse import urlparse
from wallettestkit.main import *
from wallettestkit.platforms import Platform, current_platform

_logger = logging.getLogger(__name__)


class ResourceError(Exception):
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


def latest_binary_url(pr=None, platform=None):
    """
    Url of latest cardano-wallet binary distribution for the current platform, built from master or from a pull
    request.

    >>> latest_binary_url(pr=3045, platform='linux')
    'https://hydra.iohk.io/job/Cardano/cardano-wallet-pr-3045/linux.musl.cardano-wallet-linux64/latest/download-by-type/file/binary-dist'

    :param pr: Pull request number, leave empty for the mainline build
    :type pr: int, str
    :param platform: Platform or its name, default is the platform the tests run on
    :type platform: Platform, str

    :return str:
    """
    platform = current_platform() if platform is None else Platform.parse(platform)
    artifact = BINARY_DIST_ARTIFACTS[platform.value]
    job = 'cardano-wallet-pr-%s' % pr if pr else 'cardano-wallet'
    return '%s/%s/%s/latest/download-by-type/file/binary-dist' % (HYDRA_JOB_URL, job, artifact)


def latest_configs_base_url(env):
    """
    Base url of latest Cardano node configuration files for environment. Known environments are served from the
    Cardano book, for others the legacy per file prefix is returned, append the file name to it.

    >>> latest_configs_base_url('preprod')
    'https://book.world.dev.cardano.org/environments/preprod/'

    :param env: Environment name, i.e. 'mainnet', 'preview' or 'vasil-dev'
    :type env: str

    :return str:
    """
    if env in CONFIGS_BOOK_ENVIRONMENTS or re.search(CONFIGS_BOOK_PATTERN, env):
        return CONFIGS_BOOK_URL % env
    return CONFIGS_LEGACY_URL % env


def latest_node_db_url(env):
    """
    Url of the node-db snapshot, updated at the end of every epoch. Only available for mainnet and testnet.

    :param env: 'mainnet' or 'testnet'
    :type env: str

    :return str:
    """
    if env not in NODE_DB_SNAPSHOT_URLS:
        raise ResourceError("Unsupported env, supported are: 'mainnet' or 'testnet'")
    return NODE_DB_SNAPSHOT_URLS[env]


def download(url, file=None, timeout=None):
    """
    Download url to file. The response body is written as is, whatever the status code.

    :param url: Url to download
    :type url: str
    :param file: Target file, default is last segment of the url path in the current directory
    :type file: str, Path
    :param timeout: Request timeout in seconds, default is timeout_requests from the config
    :type timeout: float

    :return Path: The written file
    """
    if file is None:
        file = os.path.basename(urlparse(url).path.rstrip('/'))
        if not file:
            raise ResourceError("Cannot derive file name from url %s, please specify file" % url)
    if timeout is None:
        timeout = TIMEOUT_REQUESTS
    file = Path(file)
    file.parent.mkdir(parents=True, exist_ok=True)
    with requests.get(url, stream=True, timeout=timeout) as resp, file.open('wb') as f:
        for chunk in resp.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
            if chunk:
                f.write(chunk)
    _logger.info("%s -> %d" % (url, resp.status_code))
    return file
