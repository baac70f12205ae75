# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    MAIN - Load configs and initialize logging
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

# Do not remove any of the imports below, used by other files
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from wallettestkit.config.config import *


# Initialize logging
logger = logging.getLogger('wallettestkit')
logger.setLevel(LOGLEVEL)

_formatter = logging.Formatter('%(asctime)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s',
                               datefmt='%Y/%m/%d %H:%M:%S')

if ENABLE_WALLETTESTKIT_LOGGING:
    WTK_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(str(WTK_LOG_FILE), maxBytes=100 * 1024 * 1024, backupCount=2)
    handler.setFormatter(_formatter)
    handler.setLevel(LOGLEVEL)
    logger.addHandler(handler)

    logger.info('WALLETTESTKIT - CARDANO WALLET E2E TEST HELPERS')
    logger.info('Version: %s' % WALLETTESTKIT_VERSION)
    logger.info('Read config from: %s' % WTK_CONFIG_FILE)
    logger.info('Logging to: %s' % WTK_LOG_FILE)

if LOG_TO_CONSOLE:
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter('[%(asctime)s] %(message)s'))
    logger.addHandler(console)
