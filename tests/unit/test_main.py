# -*- coding: utf-8 -*-

"""
Unit tests for the fedup command line
"""

import errno
from unittest.mock import patch

import pytest

from fedup import __version__
from fedup.__main__ import main, parse_args
from fedup.errors import CommandError, PlatformError
from fedup.utils import ALL_OK


class TestParseArgs:
    def test_no_flags(self):
        args = parse_args([])
        assert not args.debug
        assert not args.quiet
        assert not args.check
        assert not args.dry_run

    def test_flags(self):
        args = parse_args(['-d', '-q', '--check', '--dry-run'])
        assert args.debug
        assert args.quiet
        assert args.check
        assert args.dry_run

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            parse_args(['--version'])

        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Tests for command selection and exit status"""

    @patch('fedup.upgrade.FedupUpgrade.run', return_value=ALL_OK)
    def test_runs_upgrade_by_default(self, mock_run, capsys):
        assert main([]) == ALL_OK
        mock_run.assert_called_once()
        assert f'fedup version: {__version__}' in capsys.readouterr().out

    @patch('fedup.info.FedupInfo.run', return_value=ALL_OK)
    @patch('fedup.upgrade.FedupUpgrade.run')
    def test_check_runs_info(self, mock_upgrade, mock_info):
        assert main(['--check', '--quiet']) == ALL_OK
        mock_info.assert_called_once()
        mock_upgrade.assert_not_called()

    @patch('fedup.upgrade.FedupUpgrade.run', return_value=ALL_OK)
    def test_quiet_hides_banner(self, mock_run, capsys):
        main(['-q'])
        assert capsys.readouterr().out == ''

    @patch('fedup.upgrade.FedupUpgrade.run', side_effect=PlatformError('This tool is for Fedora workstations only!'))
    def test_platform_error_exit_status(self, mock_run, capsys):
        assert main(['-q']) == errno.EPERM
        assert 'Fedora workstations only' in capsys.readouterr().err

    @patch('fedup.upgrade.FedupUpgrade.run', side_effect=CommandError('/usr/bin/dnf system-upgrade reboot -y', 3))
    def test_command_error_exit_status(self, mock_run):
        assert main(['-q']) == 3

    @patch('fedup.upgrade.FedupUpgrade.run', return_value=ALL_OK)
    def test_dry_run_is_passed_to_runner(self, mock_run):
        with patch('fedup.upgrade.FedupUpgrade.__init__', return_value=None) as mock_init:
            main(['-q', '-n'])

        mock_init.assert_called_once_with(debug=False, quiet=True, dry_run=True)
