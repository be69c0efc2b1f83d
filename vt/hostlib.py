import collections.abc
import dataclasses
import json
import logging
import types
import typing


log = logging.getLogger(__name__)


USER_SHORTCUTS = types.MappingProxyType({
    "r": "root",
    "u": "ubuntu",
    "m": "mulisu",
})

RECORD_FIELDS = ("host", "addr", "port", "domain", "phost")


@dataclasses.dataclass(frozen=True)
class Host:
    name: str = ""
    address: str = ""
    port: str = ""
    domain: str = ""
    parent: str = ""

    @classmethod
    def from_record(cls, record: dict) -> "Host":
        return cls(
            name=record["host"],
            address=record["addr"],
            port=record["port"],
            domain=record["domain"],
            parent=record["phost"],
        )

    @property
    def is_physical(self):
        return self.domain == ""


class HostTable(collections.abc.Mapping):
    """
    Read-only alias -> Host mapping, built once from the config records.
    """

    def __init__(self, hosts: typing.Mapping = None):
        self._hosts = types.MappingProxyType(dict(hosts or {}))

    @classmethod
    def from_records(cls, records) -> "HostTable":
        hosts = {}
        for record in records:
            host = Host.from_record(record)
            hosts[host.name] = host
        table = cls(hosts)
        for host in table.values():
            if host.parent not in table:
                log.warning(
                    "host %s refers to unknown parent host %r", host.name, host.parent
                )
        return table

    def __getitem__(self, alias) -> Host:
        return self._hosts[alias]

    def __iter__(self):
        return iter(self._hosts)

    def __len__(self):
        return len(self._hosts)

    def resolve_physical(self, host: Host) -> Host:
        # unknown parents resolve to an empty host and are used as is
        return self._hosts.get(host.parent, Host())

    def physical_aliases(self):
        return sorted(alias for alias, h in self._hosts.items() if h.is_physical)

    def virtual_aliases(self):
        return sorted(alias for alias, h in self._hosts.items() if not h.is_physical)


def load_records(path) -> typing.List[dict]:
    """
    Read the JSON host list at ``path``.

    The file holds an array of objects with string fields
    ``host, addr, port, domain, phost``; missing fields are empty strings
    and a JSON ``null`` document or field counts as empty::

        [
            {"host": "ha1", "addr": "203.0.113.50", "port": "2222",
             "domain": "", "phost": "ha1"},
            {"host": "v10000", "addr": "203.0.113.50", "port": "22210",
             "domain": "ha1-0-v10000", "phost": "ha1"}
        ]

    :raise ConfigReadError: the file cannot be read
    :raise ConfigParseError: the contents are not a list of such objects
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise ConfigReadError(str(exc)) from exc
    try:
        document = json.loads(data)
    except ValueError as exc:
        raise ConfigParseError(str(exc)) from exc

    if document is None:
        document = []
    if not isinstance(document, list):
        raise ConfigParseError(
            f"expected an array of hosts, got {type(document).__name__}"
        )
    records = []
    for index, item in enumerate(document):
        if not isinstance(item, dict):
            raise ConfigParseError(f"entry #{index} is not an object")
        record = {}
        for field in RECORD_FIELDS:
            value = item.get(field)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ConfigParseError(
                    f"entry #{index}: field {field!r} must be a string"
                )
            record[field] = value
        records.append(record)
    log.debug("loaded %d host records from %s", len(records), path)
    return records


class ConfigError(Exception):
    pass


class ConfigReadError(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass
