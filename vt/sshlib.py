import shlex
import logging
import subprocess
from typing import List, Sequence


log = logging.getLogger("sshlib")


VIRSH = "virsh"
VIRT_VIEWER = "virt-viewer"
SSH = "ssh"
SCP = "scp"
SSH_COPY_ID = "ssh-copy-id"


def libvirt_uri(address, port, user) -> str:
    return f"qemu+ssh://{user}@{address}:{port}/system"


def ssh_destination(address, user) -> str:
    return f"{user}@{address}"


def virsh_list_commandline(address, port, user) -> List[str]:
    # virsh takes a whole command in one argument
    return [VIRSH, "-c", libvirt_uri(address, port, user), "list --all"]


def virsh_shell_commandline(address, port, user) -> List[str]:
    return [VIRSH, "-c", libvirt_uri(address, port, user)]


def viewer_commandline(address, port, domain, user) -> List[str]:
    return [VIRT_VIEWER, "-c", libvirt_uri(address, port, user), domain]


def ssh_commandline(address, port, user, command: Sequence[str] = ()) -> List[str]:
    return [SSH, "-X", "-p", port, ssh_destination(address, user), *command]


def scp_commandline(address, port, user, files: Sequence[str]) -> List[str]:
    return [SCP, "-P", port, *files, ssh_destination(address, user) + ":"]


def copy_id_commandline(address, port, user) -> List[str]:
    return [SSH_COPY_ID, "-p", port, ssh_destination(address, user)]


def run(commandline: Sequence[str]) -> int:
    """
    Run ``commandline`` attached to this process' stdin/stdout/stderr and
    wait for it to exit.

    :raise CommandError: the program could not be started or exited non-zero
    """
    log.info("exec: %s", shlex.join(commandline))
    try:
        rc = subprocess.call(list(commandline))
    except OSError as exc:
        raise CommandError(f"{commandline[0]}: {exc.strerror or exc}") from exc
    if rc != 0:
        raise CommandError(f"{commandline[0]} -> exited with {rc}", returncode=rc)
    return rc


class CommandError(Exception):
    def __init__(self, message, returncode=None):
        super(CommandError, self).__init__(message)
        self.returncode = returncode
