# -*- coding: utf-8 -*-

"""
Unit tests for fedup.command module
"""

import logging

import pytest
import responses

from fedup import settings
from fedup.command import FedupCommand
from fedup.pms import Dnf
from fedup.runner import CommandRunner
from tests.fixtures.runner import FakeRunner
from tests.fixtures.sample_data import RELEASES_JSON


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    def factory(content):
        path = tmp_path / 'custom.conf'
        path.write_text(content)
        monkeypatch.setattr(settings, 'CONF_FILE', str(path))
        return str(path)

    return factory


class TestDefaults:
    def test_without_config_file(self, as_root):
        command = FedupCommand(runner=FakeRunner())

        assert command.releases_url == settings.RELEASES_URL
        assert command.lookup == 'shell'
        assert command.dependencies == ['jq', 'curl']
        assert command.proxy is None
        assert command.timeout == settings.HTTP_TIMEOUT
        assert command.os_release_file == settings.OS_RELEASE_FILE
        assert isinstance(command.pms, Dnf)

    def test_builds_runner(self):
        command = FedupCommand(dry_run=True)

        assert isinstance(command.runner, CommandRunner)
        assert command.runner.dry_run is True

    def test_run_is_abstract(self):
        with pytest.raises(NotImplementedError):
            FedupCommand(runner=FakeRunner()).run()


class TestConfiguration:
    """Tests for config file and environment settings"""

    def test_config_file(self, config_file):
        config_file(
            '[fedup]\n'
            'releases_url = https://mirror.example.com/releases.json\n'
            'lookup = HTTP\n'
            'dependencies = jq\n'
            'proxy = http://proxy:3128\n'
            'timeout = 10\n'
            'debug = yes\n'
            'dry_run = on\n'
        )
        command = FedupCommand()

        assert command.releases_url == 'https://mirror.example.com/releases.json'
        assert command.lookup == 'http'
        assert command.dependencies == ['jq']
        assert command.proxy == 'http://proxy:3128'
        assert command.timeout == 10
        assert command._debug is True
        assert command.runner.dry_run is True

    def test_invalid_values_fall_back(self, config_file):
        config_file('[fedup]\nlookup = ftp\ntimeout = soon\n')
        command = FedupCommand(runner=FakeRunner())

        assert command.lookup == 'shell'
        assert command.timeout == settings.HTTP_TIMEOUT

    def test_environment_overrides_file(self, config_file, monkeypatch):
        config_file('[fedup]\nlookup = shell\n')
        monkeypatch.setenv('FEDUP_LOOKUP', 'http')

        assert FedupCommand(runner=FakeRunner()).lookup == 'http'

    def test_running_options(self, capsys):
        FedupCommand(runner=FakeRunner())._show_running_options()

        output = capsys.readouterr().out
        assert settings.RELEASES_URL in output
        assert 'dnf' in output


class TestMessages:
    def test_operation_ok(self, capsys):
        FedupCommand(runner=FakeRunner()).operation_ok('done')
        assert 'done' in capsys.readouterr().out

    def test_operation_failed(self, capsys):
        FedupCommand(runner=FakeRunner()).operation_failed('broken')

        error = capsys.readouterr().err
        assert 'Failed' in error
        assert 'broken' in error


class TestLogging:
    """Tests for the log file setup"""

    def test_writes_log_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, 'LOG_FILE', str(tmp_path / 'fedup.log'))
        FedupCommand(runner=FakeRunner())

        assert (tmp_path / 'fedup.log').exists()

    def test_unwritable_log_file_falls_back_to_stderr(self, tmp_path, monkeypatch, capsys):
        log_file = str(tmp_path / 'missing' / 'fedup.log')
        monkeypatch.setattr(settings, 'LOG_FILE', log_file)

        command = FedupCommand(runner=FakeRunner(), debug=True)

        assert command.lookup == 'shell'
        error = capsys.readouterr().err
        assert 'Can not write log file' in error
        assert log_file in error
        assert logging.getLogger('fedup').level == logging.DEBUG


class TestLatestVersion:
    """Tests for choosing the release lookup"""

    def test_shell_lookup_when_tools_are_installed(self):
        runner = FakeRunner(pipe_result=(0, '40\n', ''))

        assert FedupCommand(runner=runner).get_latest_version() == 40
        assert runner.captured == ['command -v curl', 'command -v jq']
        assert len(runner.calls) == 1
        assert runner.calls[0].startswith('curl -s ')

    @pytest.mark.parametrize('missing', [['jq'], ['curl'], ['curl', 'jq']])
    def test_http_lookup_when_tools_are_missing(self, missing):
        runner = FakeRunner(missing_tools=missing)

        with responses.RequestsMock() as mocked:
            mocked.add(responses.GET, settings.RELEASES_URL, json=RELEASES_JSON, status=200)
            assert FedupCommand(runner=runner).get_latest_version() == 40
            assert len(mocked.calls) == 1

        assert runner.calls == []
        assert f'command -v {missing[0]}' in runner.captured

    @responses.activate
    def test_http_lookup_skips_tool_detection(self, monkeypatch):
        monkeypatch.setenv('FEDUP_LOOKUP', 'http')
        responses.add(responses.GET, settings.RELEASES_URL, json=RELEASES_JSON, status=200)
        runner = FakeRunner()

        assert FedupCommand(runner=runner).get_latest_version() == 40
        assert runner.captured == []
        assert runner.calls == []
