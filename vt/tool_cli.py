import argparse
import logging


log = logging.getLogger(__name__)


COMMANDS_HELP = """\
The commands supported are:
    ls      List supported host names or list domains on a physical
    go      Exec virsh on a physical
    view    Exec virt-viewer for a virtual
    ssh     Ssh to a physical/virtual
    alias   Show host info
    copy    Copy files
    copy-id Copy Identify file
"""

EXAMPLES_HELP = """\
Examples:
    %(prog)s ls      [phost|vhost]
    %(prog)s go      <phost|vhost>
    %(prog)s view    <vhost>
    %(prog)s ssh     <phost|vhost> <user> [command]
    %(prog)s alias   <phost|vhost>
    %(prog)s copy    <phost|vhost> <user> <files...>
    %(prog)s copy-id <phost|vhost> <user>
"""


def interface_vt(prog=None):
    # help text only; argv words are never parsed as options
    cli = argparse.ArgumentParser(
        prog=prog,
        usage="%(prog)s <command> <args ...>",
        description=COMMANDS_HELP,
        epilog=EXAMPLES_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    def call(argv, config_path=None):
        from vt import core, sshlib

        if config_path is None:
            config_path = core.default_config_path(cli.prog)
        try:
            app = core.AppService(config_path)
        except core.ConfigError as exc:
            print(f"Failed to read/parse {config_path} : {exc}")
            return None

        command, args = (argv[0], list(argv[1:])) if argv else (None, [])
        try:
            return dispatch(app, command, args)
        except core.UnknownAlias:
            from vt.tools import listing

            listing.show_hosts(app)
        except core.UnknownUserShortcut:
            from vt.tools import listing

            listing.show_users(app)
        except UsageError:
            cli.print_help()
        except sshlib.CommandError as exc:
            log.debug("command failed: %s", exc)
            print(exc)
            cli.print_help()
            return exc.returncode
        return None

    return cli, call


def dispatch(app, command, args):
    """
    Run ``command`` against ``args`` and return the child exit status,
    or None when nothing was spawned.

    :raise UsageError: unknown command or missing arguments
    :raise UnknownAlias, UnknownUserShortcut: lookup failures
    :raise CommandError: the external program failed
    """
    from vt.tools import listing, virsh, ssh, filetransfer

    if command == "ls" and not args:
        listing.show_hosts(app)
        return None
    if command is None or not args:
        raise UsageError
    alias, rest = args[0], args[1:]
    host = app.get_host(alias)

    if command == "ls":
        return virsh.list_domains(app, host)
    elif command == "go":
        return virsh.shell(app, host)
    elif command == "view":
        if host.is_physical:
            raise UsageError
        return virsh.view(app, host)
    elif command == "ssh":
        if len(rest) < 1:
            raise UsageError
        return ssh.main(app, host, rest[0], rest[1:])
    elif command == "alias":
        listing.show_alias(host)
        return None
    elif command == "copy":
        if len(rest) < 2:
            raise UsageError
        return filetransfer.main(app, host, rest[0], rest[1:])
    elif command == "copy-id":
        if len(rest) < 1:
            raise UsageError
        return ssh.copy_id(app, host, rest[0])
    raise UsageError


class UsageError(Exception):
    pass
