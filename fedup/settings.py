# -*- coding: UTF-8 -*-

# Copyright (c) 2023-2026 Joel Owusu-Ansah
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import os

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'

LOCALE_PATH = '/usr/share/locale'

CONF_FILE = os.environ.get('FEDUP_CONF', '/etc/fedup.conf')
CONF_SECTION = 'fedup'

LOG_FILE = '/var/tmp/fedup.log'

OS_RELEASE_FILE = '/etc/os-release'
TARGET_DISTRO = 'fedora'

RELEASES_URL = 'https://getfedora.org/releases.json'
LOOKUP_METHODS = ('shell', 'http')
LOOKUP_TOOLS = ['curl', 'jq']

DEPENDENCIES = ['jq', 'curl']
SYSTEM_UPGRADE_PLUGIN = 'dnf-plugin-system-upgrade'

HTTP_TIMEOUT = 60  # seconds
