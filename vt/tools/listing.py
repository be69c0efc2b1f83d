from vt import core, hostlib


HOSTS_PER_ROW = 7


def format_columns(names, per_row=HOSTS_PER_ROW):
    """
    Left-aligned cells one character wider than the longest name,
    ``per_row`` cells per line.
    """
    if not names:
        return []
    width = max(len(name) for name in names) + 1
    return [
        "".join(name.ljust(width) for name in names[i:i + per_row])
        for i in range(0, len(names), per_row)
    ]


def show_hosts(app: core.AppService):
    print("Supported phost:")
    for line in format_columns(app.hosts.physical_aliases()):
        print(line)
    print("\nSupported vhost:")
    for line in format_columns(app.hosts.virtual_aliases()):
        print(line)


def show_users(app: core.AppService):
    print("Supported user shortcut:")
    for shortcut in sorted(app.users):
        print(shortcut, app.users[shortcut])


def show_alias(host: hostlib.Host):
    print("addr  :", host.address)
    print("port  :", host.port)
    print("phost :", host.parent)
    print("domain:", host.domain)
