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
import re
import shlex

import requests

from .errors import ReleaseLookupError, VersionParseError
from .runner import CommandRunner
from .settings import HTTP_TIMEOUT, LOOKUP_METHODS, RELEASES_URL
from .utils import ALL_OK

__author__ = 'Joel Owusu-Ansah'
__license__ = 'GPLv3'
__all__ = ['ReleaseFeed', 'select_latest_version']

_ = gettext.gettext
logger = logging.getLogger('fedup')

# numeric entries only, compared as numbers
JQ_FILTER = r'[.[].version | select(test("^\\d+$")) | tonumber] | max'

_NUMBER_RE = re.compile(r'^\d+$', re.ASCII)


def select_latest_version(versions):
    """
    int select_latest_version(iterable versions)
    ['39', '40', 'rawhide'] -> 40
    """

    numeric = [int(str(item).strip()) for item in versions if _NUMBER_RE.match(str(item).strip())]
    if not numeric:
        raise VersionParseError(_('No numeric release found'))

    return max(numeric)


class ReleaseFeed:
    """
    Latest Fedora release, read from the public releases list.

    ``shell`` lookup pipes curl into jq, ``http`` lookup uses requests.
    """

    def __init__(self, runner=None, url=RELEASES_URL, lookup='shell', proxy=None, timeout=HTTP_TIMEOUT):
        if lookup not in LOOKUP_METHODS:
            raise ValueError(f'invalid lookup method: {lookup}')

        self._runner = runner or CommandRunner()
        self._url = url
        self._lookup = lookup
        self._proxy = proxy
        self._timeout = timeout

    def latest(self):
        """
        int latest(void)
        """

        if self._lookup == 'http':
            _version = self._latest_http()
        else:
            _version = self._latest_shell()

        logger.info('Latest release: %s', _version)

        return _version

    def _latest_shell(self):
        _ret, _output, _error = self._runner.pipe(
            f'curl -s {shlex.quote(self._url)}',
            f'jq -r {shlex.quote(JQ_FILTER)}',
        )
        logger.debug('Release lookup output: %s', _output)
        if _ret != ALL_OK:
            logger.error('Release lookup failed (%s): %s', _ret, _error)
            raise ReleaseLookupError(_('Error retrieving releases from %(url)s: %(error)s') % {
                'url': self._url,
                'error': _error.strip() or _ret,
            })

        # jq prints "null" for an empty list
        return select_latest_version([_output.strip()])

    def _latest_http(self):
        _proxies = {'http': self._proxy, 'https': self._proxy} if self._proxy else None
        try:
            _response = requests.get(self._url, proxies=_proxies, timeout=self._timeout)
            _response.raise_for_status()
            _releases = _response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error('Release lookup failed: %s', e)
            raise ReleaseLookupError(_('Error retrieving releases from %(url)s: %(error)s') % {
                'url': self._url,
                'error': e,
            }) from e

        if not isinstance(_releases, list):
            raise ReleaseLookupError(_('Unexpected releases format from %s') % self._url)

        return select_latest_version(
            item.get('version', '') for item in _releases if isinstance(item, dict)
        )
