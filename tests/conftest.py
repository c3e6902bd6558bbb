# -*- coding: utf-8 -*-

"""
Pytest configuration and shared fixtures
"""

import os
import signal

import pytest

from fedup import settings
from tests.fixtures.runner import FakeRunner
from tests.fixtures.sample_data import OS_RELEASE_FEDORA, OS_RELEASE_UBUNTU


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep config, log file and signal handlers away from the host"""
    for key in list(os.environ):
        if key.startswith('FEDUP_'):
            monkeypatch.delenv(key)

    monkeypatch.setattr(settings, 'CONF_FILE', str(tmp_path / 'fedup.conf'))
    monkeypatch.setattr(settings, 'LOG_FILE', str(tmp_path / 'fedup.log'))

    handlers = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTERM)}
    yield
    for sig, handler in handlers.items():
        signal.signal(sig, handler)


@pytest.fixture
def as_root(monkeypatch):
    """Run without the sudo prefix"""
    monkeypatch.setattr('fedup.utils.is_root_user', lambda: True)


@pytest.fixture
def os_release_factory(tmp_path):
    def factory(content):
        path = tmp_path / 'os-release'
        path.write_text(content, encoding='utf-8')
        return str(path)

    return factory


@pytest.fixture
def fedora_release(os_release_factory):
    """os-release of a Fedora 39 Workstation"""
    return os_release_factory(OS_RELEASE_FEDORA.format(version=39))


@pytest.fixture
def ubuntu_release(os_release_factory):
    return os_release_factory(OS_RELEASE_UBUNTU)


@pytest.fixture
def fake_runner():
    return FakeRunner()
