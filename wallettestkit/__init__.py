# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
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

import wallettestkit.encoding
import wallettestkit.shell
import wallettestkit.derivation
import wallettestkit.platforms
import wallettestkit.fixtures
import wallettestkit.resources
import wallettestkit.genesis
import wallettestkit.files

__all__ = ["encoding", "shell", "derivation", "platforms", "fixtures", "resources", "genesis", "files"]
