# -*- coding: utf-8 -*-
#
#    WalletTestKit - Cardano Wallet End-to-End Test Helpers
#    PyPi Setup Tool
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

from setuptools import setup
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
version = '0.3.1'

# Get the long description from the relevant file
readmetxt = ''
try:
      with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
          readmetxt = f.read()
except IOError:
      pass

kwargs = {}


install_requires = [
      'requests>=2.25.0',
]

kwargs['install_requires'] = install_requires

setup(
      name='wallettestkit',
      version=version,
      description='Helpers for Cardano wallet end-to-end test suites',
      long_description=readmetxt,
      classifiers=[
            'Development Status :: 4 - Beta',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)',
            'Natural Language :: English',
            'Operating System :: Microsoft :: Windows',
            'Operating System :: MacOS',
            'Operating System :: POSIX',
            'Programming Language :: Python :: 3.8',
            'Programming Language :: Python :: 3.9',
            'Programming Language :: Python :: 3.10',
            'Programming Language :: Python :: 3.11',
            'Programming Language :: Python :: 3.12',
            'Topic :: Software Development :: Testing',
      ],
      author='WalletTestKit Developers',
      license='AGPL3',
      packages=['wallettestkit', 'wallettestkit.config'],
      test_suite='tests',
      include_package_data=True,
      keywords='cardano wallet e2e testing fixtures cardano-address bech32',
      zip_safe=False,
      **kwargs
)
