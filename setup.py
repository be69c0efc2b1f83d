from setuptools import setup

setup(
    name="vt",
    version="0.1.0",
    description="Shortcuts for libvirt hosts and guests: virsh, virt-viewer, ssh, scp",
    packages=["vt", "vt.tools"],
    install_requires=[],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8.0",
    entry_points={"console_scripts": [
        "vt=vt.main_local:main",
    ]},
)
