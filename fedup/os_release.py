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

"""
Local release information, read from the os-release file
(see os-release(5)).
"""

import gettext
import logging
import os
import re

import distro

from .errors import OsReleaseError, PlatformError, VersionParseError
from .settings import OS_RELEASE_FILE, TARGET_DISTRO

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'
__all__ = ['check_platform', 'get_current_version', 'parse_release_version']

_ = gettext.gettext
logger = logging.getLogger('fedup')

VERSION_KEY = 'VERSION_ID'

_NUMBER_RE = re.compile(r'^\d+$', re.ASCII)


def _check_exists(path):
    if not os.path.isfile(path):
        logger.critical('%s not found', path)
        raise OsReleaseError(_('%s does not exist') % path)


def get_distro_id(path=OS_RELEASE_FILE):
    """
    string get_distro_id(string path)
    """

    _check_exists(path)
    try:
        _distro = distro.LinuxDistribution(
            include_lsb=False,
            include_uname=False,
            os_release_file=path,
        )

        return _distro.id()
    except OSError as e:
        raise OsReleaseError(_('Can not read %(path)s: %(error)s') % {'path': path, 'error': e}) from e


def check_platform(path=OS_RELEASE_FILE, target=TARGET_DISTRO):
    """
    Raises PlatformError unless the distribution id contains ``target``
    (case insensitive)
    """

    _id = get_distro_id(path)
    logger.debug('Distribution id: %s', _id)
    if target.lower() not in _id.lower():
        logger.critical('Unsupported distribution: %s', _id)
        raise PlatformError(_('This tool is for %s workstations only!') % target.capitalize())

    return _id


def parse_release_version(line):
    """
    int parse_release_version(string line)
    'VERSION_ID=39' -> 39
    """

    _key, _sep, _value = line.partition('=')
    _value = _value.strip().strip('"\'').strip()
    if not _sep or not _NUMBER_RE.match(_value):
        raise VersionParseError(_('Invalid release version: %s') % line.strip())

    return int(_value)


def get_current_version(path=OS_RELEASE_FILE):
    """
    int get_current_version(string path)
    """

    _check_exists(path)
    try:
        with open(path, encoding='utf-8') as f:
            lines = f.readlines()
    except OSError as e:
        raise OsReleaseError(_('Can not read %(path)s: %(error)s') % {'path': path, 'error': e}) from e

    for line in lines:
        if line.partition('=')[0].strip().upper() == VERSION_KEY:
            _version = parse_release_version(line)
            logger.info('Current release: %s', _version)

            return _version

    raise VersionParseError(_('%(key)s not found in %(path)s') % {'key': VERSION_KEY, 'path': path})
