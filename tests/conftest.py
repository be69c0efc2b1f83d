import json

import pytest

from vt import core, sshlib


HOSTS = [
    {"host": "h1", "addr": "1.2.3.4", "port": "22", "domain": "", "phost": "h1"},
    {"host": "h2", "addr": "5.6.7.8", "port": "2222", "domain": "", "phost": "h2"},
    {"host": "v1", "addr": "1.2.3.4", "port": "22210", "domain": "guest1", "phost": "h1"},
    {"host": "v2", "addr": "1.2.3.4", "port": "22211", "domain": "guest2", "phost": "h1"},
]


@pytest.fixture
def write_config(tmp_path):
    def write(hosts, name="vt.json"):
        path = tmp_path / name
        path.write_text(json.dumps(hosts))
        return str(path)

    return write


@pytest.fixture
def config_path(write_config):
    return write_config(HOSTS)


@pytest.fixture
def app(config_path):
    return core.AppService(config_path)


@pytest.fixture
def spawned(monkeypatch):
    """Records command lines instead of running them."""
    calls = []

    def fake_run(commandline):
        calls.append(list(commandline))
        return 0

    monkeypatch.setattr(sshlib, "run", fake_run)
    return calls
