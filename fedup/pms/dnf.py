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

import logging

from .pms import Pms
from ..settings import SYSTEM_UPGRADE_PLUGIN

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'

logger = logging.getLogger('fedup')


@Pms.register('Dnf')
class Dnf(Pms):
    """
    PMS for dnf based systems (Fedora)
    """

    def __init__(self, runner=None, sudo=None):
        super().__init__(runner, sudo)

        self._name = 'dnf'  # Package Management System name
        self._pms = '/usr/bin/dnf'  # Package Management System command

    def install_silent(self, package_set):
        """
        void install_silent(list package_set)
        One transaction per package, stops at the first failure
        """

        if not isinstance(package_set, list):
            raise TypeError(f'package_set is not a list: {package_set}')

        for package in package_set:
            logger.info('Installing %s', package)
            self._runner.check(self._privileged(f'install {package.strip()} -y'))

    def upgrade_refresh(self):
        """
        void upgrade_refresh(void)
        """

        self._runner.check(self._privileged('upgrade --refresh -y'))

    def install_system_upgrade_plugin(self):
        """
        void install_system_upgrade_plugin(void)
        """

        self._runner.check(self._privileged(f'install {SYSTEM_UPGRADE_PLUGIN} -y'))

    def system_upgrade_download(self, release):
        """
        void system_upgrade_download(int release)
        """

        self._runner.check(self._privileged(f'system-upgrade download --releasever={int(release)} -y'))

    def system_upgrade_reboot(self):
        """
        void system_upgrade_reboot(void)
        """

        self._runner.check(self._privileged('system-upgrade reboot -y'))
