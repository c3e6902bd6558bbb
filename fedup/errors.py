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

import errno
import gettext

_ = gettext.gettext

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'
__all__ = [
    'FedupError',
    'PlatformError',
    'OsReleaseError',
    'VersionParseError',
    'ReleaseLookupError',
    'CommandError',
]


class FedupError(Exception):
    """
    Base error. ``code`` is used as the process exit status.
    """

    code = errno.EPERM

    def __init__(self, message='', code=None):
        super().__init__(message)
        if code is not None:
            self.code = code


class PlatformError(FedupError):
    code = errno.EPERM


class OsReleaseError(FedupError):
    code = errno.ENOENT


class VersionParseError(FedupError):
    code = errno.ENODATA


class ReleaseLookupError(FedupError):
    code = errno.ENODATA


class CommandError(FedupError):
    """
    External command exited with a non-zero status
    """

    def __init__(self, cmd, returncode):
        self.cmd = cmd
        self.returncode = returncode

        # negative values mean killed by signal
        super().__init__(
            _('Command "%(cmd)s" failed with exit status %(status)s') % {
                'cmd': cmd,
                'status': returncode,
            },
            code=returncode if returncode > 0 else 1,
        )
