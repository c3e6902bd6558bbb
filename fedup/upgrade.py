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
import logging
import signal
import sys

from . import printcolor
from .command import FedupCommand
from .utils import ALL_OK

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'
__all__ = 'FedupUpgrade'

_ = gettext.gettext
logger = logging.getLogger('fedup')


class FedupUpgrade(FedupCommand):
    """
    Upgrades the running Fedora Workstation to the latest release
    with the dnf system-upgrade plugin.
    """

    UP_TO_DATE = _('You are on the latest release of Fedora Workstation')

    def __init__(self, *args, **kwargs):
        signal.signal(signal.SIGINT, self._exit_gracefully)
        signal.signal(signal.SIGTERM, self._exit_gracefully)

        super().__init__(*args, **kwargs)

    def _exit_gracefully(self, signal_number, frame):
        self.operation_failed(_('Killing %s before time!!!') % self.CMD)
        logger.critical('Exiting %s, signal: %s', self.CMD, signal_number)
        sys.exit(errno.EINTR)

    def install_dependencies(self):
        if not self.dependencies:
            return

        print(_('Installing dependencies: %s') % ' '.join(self.dependencies))
        self.pms.install_silent(self.dependencies)
        self.operation_ok()

    def upgrade(self, release):
        """
        Refresh, plugin install, download and reboot. The first failing step
        raises CommandError and the remaining ones are not run.
        """

        steps = [
            (_('Upgrading current system...'), self.pms.upgrade_refresh, ()),
            (_('Installing system upgrade plugin...'), self.pms.install_system_upgrade_plugin, ()),
            (_('Downloading Fedora %s packages...') % release, self.pms.system_upgrade_download, (release,)),
            (_('Rebooting to apply the upgrade...'), self.pms.system_upgrade_reboot, ()),
        ]

        for message, step, step_args in steps:
            print(message)
            logger.info(message)
            step(*step_args)
            self.operation_ok()

    def run(self, args=None):
        if not self._quiet:
            self._show_running_options()

        self.check_platform()
        self.install_dependencies()

        current = self.get_current_version()
        latest = self.get_latest_version()

        if current == latest:
            logger.info('Release %s is up to date', current)
            self.operation_ok(self.UP_TO_DATE)
            return ALL_OK

        if current > latest:
            logger.warning('Current release %s is newer than latest %s', current, latest)
            printcolor.warning(_('Fedora %(current)s is newer than the latest release %(latest)s') % {
                'current': current,
                'latest': latest,
            })

        print(_('Upgrading from Fedora %(current)s to Fedora %(latest)s') % {
            'current': current,
            'latest': latest,
        })
        self.upgrade(latest)

        return ALL_OK
