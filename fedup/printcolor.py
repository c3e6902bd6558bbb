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

import sys

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'

WARNING = '\033[93m'
FAIL = '\033[91m'
OK_GREEN = '\033[92m'
END_COLOR = '\033[0m'


def _print(color, text, stream=None):
    print(f'{color}{text}{END_COLOR}', file=stream or sys.stdout)


def warning(text):
    _print(WARNING, text, sys.stderr)


def fail(text):
    _print(FAIL, text, sys.stderr)


def ok(text):
    _print(OK_GREEN, text)
