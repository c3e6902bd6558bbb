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
import logging

from rich.table import Table

from .command import FedupCommand
from .utils import ALL_OK

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'
__all__ = ['FedupInfo']

_ = gettext.gettext
logger = logging.getLogger('fedup')


class FedupInfo(FedupCommand):
    def _status(self, current, latest):
        if current == latest:
            return _('up to date')

        if current > latest:
            return _('newer than latest')

        return _('upgrade available')

    def _show_info(self, current, latest):
        status = self._status(current, latest)
        logger.debug('Current: %s, latest: %s, status: %s', current, latest, status)

        if self._quiet:
            print(f'{current}\t{latest}\t{status}')
            return

        table = Table(show_header=True, header_style='bold')
        table.add_column('CURRENT')
        table.add_column('LATEST')
        table.add_column('STATUS')
        table.add_row(str(current), str(latest), status)
        self.console.print(table)

    def run(self, args=None):
        if not self._quiet:
            self._show_running_options()

        self.check_platform()
        self._show_info(self.get_current_version(), self.get_latest_version())

        return ALL_OK
