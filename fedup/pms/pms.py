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

from .. import utils
from ..runner import CommandRunner

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'


class Pms:
    '''
    PMS: Package Management System
    Interface class
    Abstract methods raise CommandError when the package manager fails
    '''

    _entity_ = None
    _entities_ = {}

    @classmethod
    def factory(cls, entity):
        return cls._entities_[entity]

    @classmethod
    def register(cls, entity):
        def decorator(subclass):
            cls._entities_[entity] = subclass
            subclass._entity_ = entity
            return subclass
        return decorator

    def __init__(self, runner=None, sudo=None):
        self._name = ''  # Package Management System name
        self._pms = ''   # Package Management System command
        self._runner = runner or CommandRunner()

        if sudo is None:
            sudo = not utils.is_root_user()
        self._sudo = 'sudo ' if sudo else ''

    def __str__(self):
        '''
        string __str__(void)
        '''

        return self._name

    def _privileged(self, args):
        return f'{self._sudo}{self._pms} {args}'

    def install_silent(self, package_set):
        '''
        void install_silent(list package_set)
        '''

        raise NotImplementedError

    def upgrade_refresh(self):
        '''
        void upgrade_refresh(void)
        '''

        raise NotImplementedError

    def install_system_upgrade_plugin(self):
        '''
        void install_system_upgrade_plugin(void)
        '''

        raise NotImplementedError

    def system_upgrade_download(self, release):
        '''
        void system_upgrade_download(int release)
        '''

        raise NotImplementedError

    def system_upgrade_reboot(self):
        '''
        void system_upgrade_reboot(void)
        '''

        raise NotImplementedError
