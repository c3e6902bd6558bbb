# -*- coding: utf-8 -*-

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

import gettext
import locale

from .settings import LOCALE_PATH

__version__ = '1.0'
__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'

# i18n
DOMAIN = 'fedup'
gettext.install(DOMAIN, LOCALE_PATH)
gettext.bindtextdomain(DOMAIN, LOCALE_PATH)
gettext.textdomain(DOMAIN)

if hasattr(locale, 'bindtextdomain'):
    locale.bindtextdomain(DOMAIN, LOCALE_PATH)
    locale.textdomain(DOMAIN)
