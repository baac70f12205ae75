# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    FILES - Small file system helpers
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

import shutil
from wallettestkit.main import *

_logger = logging.getLogger(__name__)


def absolute_path(path):
    """
    Resolve path starting with '.' against the current working directory, other paths are returned unchanged

    :param path: File or directory path
    :type path: str

    :return str:
    """
    path = str(path)
    if path.startswith('.'):
        return os.path.join(os.getcwd(), path[1:].lstrip('/\\'))
    return path


def make_dir(path):
    Path(path).mkdir(parents=True, exist_ok=True)


def remove_files(path):
    """
    Remove file or directory tree, nothing happens if path does not exist

    :param path: File or directory
    :type path: str, Path
    """
    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(str(path))
    elif path.exists() or path.is_symlink():
        path.unlink()
    _logger.debug("Removed %s" % path)


def move(src, dst):
    """
    Move file or directory, an existing destination file is replaced

    :param src: Source path
    :type src: str, Path
    :param dst: Destination path
    :type dst: str, Path
    """
    dst = Path(dst)
    if dst.is_file():
        dst.unlink()
    shutil.move(str(src), str(dst))
    _logger.debug("Moved %s to %s" % (src, dst))
