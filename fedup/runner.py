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
import subprocess

from .errors import CommandError
from .utils import ALL_OK

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'
__all__ = ['CommandRunner']

logger = logging.getLogger('fedup')

SHELL = '/bin/bash'


def _to_str(value):
    if isinstance(value, bytes):
        try:
            return str(value, encoding='utf8')
        except UnicodeDecodeError:
            return str(value)

    return value if value is not None else ''


class CommandRunner:
    """
    Runs shell commands for the rest of the program.

    Every external process goes through one instance of this class, so tests
    can swap it for a recording double. In dry run mode, commands that change
    the system (``run`` and ``check``) are printed instead of executed; the
    read-only ``capture`` and ``pipe`` still run.
    """

    def __init__(self, dry_run=False):
        self._dry_run = dry_run

    @property
    def dry_run(self):
        return self._dry_run

    def run(self, cmd):
        """
        int run(string cmd)
        Output goes straight to the terminal
        """

        logger.debug(cmd)
        if self._dry_run:
            print(cmd)
            return ALL_OK

        _process = subprocess.Popen(cmd, shell=True, executable=SHELL)

        return _process.wait()

    def check(self, cmd):
        """
        Like run() but raises CommandError on a non-zero exit status
        """

        _ret = self.run(cmd)
        if _ret != ALL_OK:
            logger.error('Command "%s" exited with status %s', cmd, _ret)
            raise CommandError(cmd, _ret)

    def capture(self, cmd):
        """
        (int, string, string) capture(string cmd)
        """

        logger.debug(cmd)
        _process = subprocess.Popen(
            cmd, shell=True, executable=SHELL, stdout=subprocess.PIPE, stderr=subprocess.PIPE
        )
        _output, _error = _process.communicate()

        return _process.returncode, _to_str(_output), _to_str(_error)

    def pipe(self, producer, consumer):
        """
        (int, string, string) pipe(string producer, string consumer)
        Equivalent to "producer | consumer". Both processes are joined before
        returning. The consumer exit status wins unless it is zero.
        """

        logger.debug('%s | %s', producer, consumer)
        _producer = subprocess.Popen(producer, shell=True, executable=SHELL, stdout=subprocess.PIPE)
        _consumer = subprocess.Popen(
            consumer,
            shell=True,
            executable=SHELL,
            stdin=_producer.stdout,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        # producer gets SIGPIPE if the consumer exits first
        _producer.stdout.close()

        _output, _error = _consumer.communicate()
        _producer.wait()

        _ret = _consumer.returncode or _producer.returncode

        return _ret, _to_str(_output), _to_str(_error)
