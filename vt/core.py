import os
import logging
from vt.hostlib import Host, HostTable, USER_SHORTCUTS, load_records
from vt.hostlib import ConfigError, ConfigReadError, ConfigParseError


log = logging.getLogger(__name__)


DEFAULT_USER_SHORTCUT = "r"


def default_config_path(prog, home_dir=None):
    """
    ``~/.config/<prog>.json``, falling back to ``~/.config/<prog>/<prog>.json``.

    When neither exists the first candidate is returned so that the read
    error names it.
    """
    if home_dir is None:
        home_dir = os.path.expanduser("~")
    config_dir = os.path.join(home_dir, ".config")
    candidates = [
        os.path.join(config_dir, f"{prog}.json"),
        os.path.join(config_dir, prog, f"{prog}.json"),
    ]
    for path in candidates:
        if os.path.isfile(path):
            return path
    return candidates[0]


class AppService:
    def __init__(self, config_path, user_shortcuts=USER_SHORTCUTS):
        self.config_path = config_path
        self.hosts = HostTable.from_records(load_records(config_path))
        self.users = user_shortcuts

    def get_host(self, alias) -> Host:
        try:
            return self.hosts[alias]
        except KeyError:
            raise UnknownAlias(alias) from None

    def get_physical_host(self, host: Host) -> Host:
        return self.hosts.resolve_physical(host)

    def get_user(self, shortcut) -> str:
        try:
            return self.users[shortcut]
        except KeyError:
            raise UnknownUserShortcut(shortcut) from None

    def default_user(self) -> str:
        return self.users[DEFAULT_USER_SHORTCUT]


class UnknownAlias(KeyError):
    pass


class UnknownUserShortcut(KeyError):
    pass
