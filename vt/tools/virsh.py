from vt import sshlib, core, hostlib


def list_domains(app: core.AppService, host: hostlib.Host):
    phost = app.get_physical_host(host)
    return sshlib.run(
        sshlib.virsh_list_commandline(phost.address, phost.port, app.default_user())
    )


def shell(app: core.AppService, host: hostlib.Host):
    phost = app.get_physical_host(host)
    return sshlib.run(
        sshlib.virsh_shell_commandline(phost.address, phost.port, app.default_user())
    )


def view(app: core.AppService, host: hostlib.Host):
    phost = app.get_physical_host(host)
    return sshlib.run(
        sshlib.viewer_commandline(
            phost.address, phost.port, host.domain, app.default_user()
        )
    )
