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

import argparse
import gettext
import logging
import sys

from . import printcolor
from .errors import FedupError
from .utils import ALL_OK, get_fedup_release

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'

_ = gettext.gettext
logger = logging.getLogger('fedup')

PROGRAM = 'fedup'


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description=_('Upgrade your Fedora Workstation installation'),
    )

    parser.add_argument('-d', '--debug', action='store_true', help=_('Enable debug mode'))

    parser.add_argument('-q', '--quiet', action='store_true', help=_('Enable silent mode (no verbose)'))

    parser.add_argument(
        '-c', '--check', action='store_true', help=_('Only show current and latest releases')
    )

    parser.add_argument(
        '-n', '--dry-run', action='store_true', help=_('Show the commands instead of running them')
    )

    parser.add_argument(
        '-v', '--version', action='version', version=f'%(prog)s {get_fedup_release()}'
    )

    return parser.parse_args(argv)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    args = parse_args(argv)

    if not args.quiet:
        print(_('%(program)s version: %(version)s') % {'program': PROGRAM, 'version': get_fedup_release()})
        sys.stdout.flush()

    if args.check:
        from .info import FedupInfo as command_class
    else:
        from .upgrade import FedupUpgrade as command_class

    try:
        command = command_class(debug=args.debug, quiet=args.quiet, dry_run=args.dry_run)
        return command.run(args)
    except FedupError as e:
        logger.critical('%s', e)
        printcolor.fail(str(e))
        return e.code


if __name__ == '__main__':
    sys.exit(main() or ALL_OK)
