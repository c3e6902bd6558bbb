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

import gettext
import logging
import sys

from rich.console import Console

from . import (
    settings,
    utils,
    printcolor,
)
from .os_release import check_platform, get_current_version
from .pms import Pms
from .releases import ReleaseFeed
from .runner import CommandRunner

_ = gettext.gettext

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'
__all__ = 'FedupCommand'

logger = logging.getLogger('fedup')


class FedupCommand:
    """
    Interface class
    """

    CMD = 'fedup'

    _debug = False
    _quiet = False
    _dry_run = False

    pms = None
    runner = None

    def __init__(self, runner=None, debug=False, quiet=False, dry_run=False):
        _log_level = logging.INFO

        _config = utils.get_config(settings.CONF_FILE, settings.CONF_SECTION)
        if not isinstance(_config, dict):
            _config = {}

        self.releases_url = utils.get_setting(_config, 'releases_url', settings.RELEASES_URL)

        self.lookup = utils.get_setting(_config, 'lookup', 'shell').strip().lower()
        if self.lookup not in settings.LOOKUP_METHODS:
            logger.warning('Unknown lookup method %s, using shell', self.lookup)
            self.lookup = 'shell'

        self.dependencies = utils.get_setting(
            _config, 'dependencies', ' '.join(settings.DEPENDENCIES)
        ).split()

        self.proxy = utils.get_setting(_config, 'proxy', None)

        self.timeout = utils.cast_to_int(
            utils.get_setting(_config, 'timeout', settings.HTTP_TIMEOUT),
            default=settings.HTTP_TIMEOUT
        )

        self._debug = debug or utils.cast_to_bool(utils.get_setting(_config, 'debug', False))
        if self._debug:
            _log_level = logging.DEBUG

        self._dry_run = dry_run or utils.cast_to_bool(utils.get_setting(_config, 'dry_run', False))
        self._quiet = quiet

        self.os_release_file = settings.OS_RELEASE_FILE

        self._init_logging(_log_level)
        logger.info('*' * 20)
        logger.info('%s in execution', self.CMD)
        logger.info('Config file: %s', settings.CONF_FILE)
        logger.debug('Config: %s', _config)

        self.console = Console()
        self.runner = runner or CommandRunner(dry_run=self._dry_run)
        self.pms = Pms.factory('Dnf')(self.runner)

    def _init_logging(self, level):
        try:
            _handler = logging.FileHandler(settings.LOG_FILE)
            _log_error = None
        except OSError as e:
            # p.e. log file created by root, now running as user
            _handler = logging.StreamHandler(sys.stderr)
            _log_error = e

        logging.basicConfig(
            format='%(asctime)s - %(levelname)s - %(module)s - %(funcName)s - %(message)s',
            level=level,
            handlers=[_handler]
        )
        if _handler not in logging.getLogger().handlers:
            _handler.close()  # logging was already configured

        logger.setLevel(level)
        if _log_error:
            printcolor.warning(
                _('Can not write log file %(file)s (%(error)s), logging to stderr') % {
                    'file': settings.LOG_FILE,
                    'error': _log_error.strerror or _log_error,
                }
            )
            logger.warning('Can not write log file %s: %s', settings.LOG_FILE, _log_error)

    def _missing_lookup_tools(self):
        return [
            tool for tool in settings.LOOKUP_TOOLS
            if self.runner.capture(f'command -v {tool}')[0] != utils.ALL_OK
        ]

    def _show_running_options(self):
        print()
        print(_('Running options: %s') % settings.CONF_FILE)
        print(f'\t{_("Releases URL")}: {self.releases_url}')
        print(f'\t{_("Lookup")}: {self.lookup}')
        print(f'\t{_("Dependencies")}: {" ".join(self.dependencies)}')
        print(f'\t{_("Proxy")}: {self.proxy}')
        print(f'\t{_("Debug")}: {self._debug}')
        print(f'\t{_("Dry run")}: {self._dry_run}')
        print(f'\t{_("PMS")}: {self.pms}')
        print()

    def check_platform(self):
        return check_platform(self.os_release_file)

    def get_current_version(self):
        return get_current_version(self.os_release_file)

    def get_latest_version(self):
        _lookup = self.lookup
        if _lookup == 'shell':
            _missing = self._missing_lookup_tools()
            if _missing:
                logger.warning('%s not found, using http lookup', ' '.join(_missing))
                _lookup = 'http'

        feed = ReleaseFeed(
            runner=self.runner,
            url=self.releases_url,
            lookup=_lookup,
            proxy=self.proxy,
            timeout=self.timeout,
        )

        with self.console.status(_('Looking for the latest release...')):
            return feed.latest()

    def operation_ok(self, info=''):
        _msg = str(' ' + _('Ok')).rjust(38, '*')
        if info:
            _msg = str(info)

        printcolor.ok(_msg)

    def operation_failed(self, info=''):
        printcolor.fail(str(' ' + _('Failed')).rjust(38, '*'))
        if info:
            printcolor.fail(info)

    def run(self, args=None):
        raise NotImplementedError
