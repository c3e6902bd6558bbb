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

import configparser
import errno
import os

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'

ALL_OK = os.EX_OK


def get_config(ini_file, section):
    """
    int/dict get_config(string ini_file, string section)
    """

    if not os.path.isfile(ini_file):
        return errno.ENOENT  # FILE_NOT_FOUND

    try:
        config = configparser.RawConfigParser()
        config.read(ini_file)

        return dict(config.items(section))
    except configparser.Error:
        return errno.ENOMSG  # INVALID_DATA


def get_setting(config, key, default=None):
    """
    Environment variable FEDUP_<KEY> wins over the config file
    """

    return os.environ.get(f'FEDUP_{key.upper()}', config.get(key, default))


def cast_to_bool(value, default=False):
    if str(value).lower() in ['false', 'off', 'no', 'n', '0']:
        return False

    if str(value).lower() in ['true', 'on', 'yes', 'y', '1']:
        return True

    return default


def cast_to_int(value, default=0):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def is_root_user():
    return os.geteuid() == 0


def get_fedup_release():
    from . import __version__

    return __version__
