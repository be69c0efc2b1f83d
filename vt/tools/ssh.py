from vt import sshlib, core, hostlib


def main(app: core.AppService, host: hostlib.Host, user_shortcut, command=()):
    user = app.get_user(user_shortcut)
    return sshlib.run(sshlib.ssh_commandline(host.address, host.port, user, command))


def copy_id(app: core.AppService, host: hostlib.Host, user_shortcut):
    user = app.get_user(user_shortcut)
    return sshlib.run(sshlib.copy_id_commandline(host.address, host.port, user))
