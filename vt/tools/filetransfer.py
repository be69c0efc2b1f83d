from vt import sshlib, core, hostlib


def main(app: core.AppService, host: hostlib.Host, user_shortcut, files):
    user = app.get_user(user_shortcut)
    return sshlib.run(sshlib.scp_commandline(host.address, host.port, user, files))
