import json
import logging

import pytest

from vt import core, hostlib


def test_load_records_fills_missing_fields(write_config):
    path = write_config([{"host": "h1", "addr": "1.2.3.4", "extra": 1}])
    [record] = hostlib.load_records(path)
    assert record == {
        "host": "h1", "addr": "1.2.3.4", "port": "", "domain": "", "phost": ""
    }


def test_load_records_missing_file(tmp_path):
    with pytest.raises(hostlib.ConfigReadError):
        hostlib.load_records(str(tmp_path / "nope.json"))


@pytest.mark.parametrize("contents", [
    "not json",
    json.dumps({"host": "h1"}),
    json.dumps(["h1"]),
    json.dumps([{"host": "h1", "port": 22}]),
])
def test_load_records_rejects_bad_documents(tmp_path, contents):
    path = tmp_path / "vt.json"
    path.write_text(contents)
    with pytest.raises(hostlib.ConfigParseError):
        hostlib.load_records(str(path))


def test_load_records_null_is_empty(tmp_path):
    path = tmp_path / "vt.json"
    path.write_text("null")
    assert hostlib.load_records(str(path)) == []
    path.write_text(json.dumps([{"host": "h1", "addr": None}]))
    [record] = hostlib.load_records(str(path))
    assert record["addr"] == ""


def test_config_errors_are_shared_with_core():
    assert core.ConfigReadError is hostlib.ConfigReadError
    assert issubclass(hostlib.ConfigParseError, core.ConfigError)


def test_duplicate_alias_last_wins():
    table = hostlib.HostTable.from_records([
        {"host": "h1", "addr": "a", "port": "1", "domain": "", "phost": "h1"},
        {"host": "h1", "addr": "b", "port": "2", "domain": "", "phost": "h1"},
    ])
    assert len(table) == 1
    assert table["h1"].address == "b"


def test_is_physical():
    assert hostlib.Host(name="h1").is_physical
    assert not hostlib.Host(name="v1", domain="guest1").is_physical


def test_listings_partition_table(app):
    physical = app.hosts.physical_aliases()
    virtual = app.hosts.virtual_aliases()
    assert physical == ["h1", "h2"]
    assert virtual == ["v1", "v2"]
    assert sorted(physical + virtual) == sorted(app.hosts)


def test_resolve_physical(app):
    assert app.hosts.resolve_physical(app.hosts["v1"]) is app.hosts["h1"]
    assert app.hosts.resolve_physical(app.hosts["h2"]) is app.hosts["h2"]


def test_dangling_parent_resolves_to_empty_host(caplog):
    records = [
        {"host": "v9", "addr": "a", "port": "1", "domain": "g9", "phost": "gone"}
    ]
    with caplog.at_level(logging.WARNING, logger="vt.hostlib"):
        table = hostlib.HostTable.from_records(records)
    assert "unknown parent host 'gone'" in caplog.text
    phost = table.resolve_physical(table["v9"])
    assert phost.address == ""
    assert phost.port == ""


def test_table_is_read_only(app):
    with pytest.raises(TypeError):
        app.hosts["new"] = hostlib.Host(name="new")
    with pytest.raises(TypeError):
        app.users["x"] = "nobody"
