# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    SHELL - Run external commands in a subshell
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
import subprocess
from wallettestkit.main import *

_logger = logging.getLogger(__name__)


class CommandError(Exception):
    """
    Raised when an external command fails, times out or cannot be started
    """
    def __init__(self, msg='', command='', returncode=None, stdout='', stderr=''):
        self.msg = msg
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        _logger.error(msg)

    def __str__(self):
        return self.msg


def normalize_command(command):
    """
    Collapse all whitespace in a command string to single spaces

    >>> normalize_command('echo   a \\n  | cat')
    'echo a | cat'

    :param command: Shell command
    :type command: str

    :return str:
    """
    return re.sub(r'\s+', ' ', command).strip()


def cmd(command, display_result=False, input=None, check=True, timeout=None):
    """
    Run a command in a subshell and return its standard output as text.

    The output is returned as is, callers usually strip the trailing newline. With check=False the exit status is
    ignored and whatever the command wrote to standard output is returned, also when it failed.

    :param command: Shell command, may contain pipes
    :type command: str
    :param display_result: Log command and output at INFO level instead of DEBUG
    :type display_result: bool
    :param input: Text fed to the command on standard input
    :type input: str
    :param check: Raise CommandError when the command exits with a non-zero status. Default is True
    :type check: bool
    :param timeout: Seconds to wait for the command, default is command_timeout from the config
    :type timeout: float

    :return str: Standard output
    """
    command = normalize_command(command)
    if timeout is None:
        timeout = COMMAND_TIMEOUT
    loglevel = logging.INFO if display_result else logging.DEBUG
    _logger.log(loglevel, command)
    try:
        process = subprocess.run(command, shell=True, input=input, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                                 universal_newlines=True, timeout=timeout)
    except subprocess.TimeoutExpired:
        raise CommandError("Command timed out after %s seconds: %s" % (timeout, command), command=command)
    except OSError as e:
        raise CommandError("Could not start command %s: %s" % (command, e), command=command)
    _logger.log(loglevel, process.stdout)
    if process.stderr:
        _logger.debug("stderr: %s" % process.stderr)
    if check and process.returncode != 0:
        raise CommandError("Command exited with status %d: %s. %s" %
                           (process.returncode, command, process.stderr.strip()), command=command,
                           returncode=process.returncode, stdout=process.stdout, stderr=process.stderr)
    return process.stdout
