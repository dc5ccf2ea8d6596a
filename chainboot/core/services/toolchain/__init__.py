"""
Toolchain service — probing and managing the pinned rustup toolchain.

    detection   read-only probes (manager, toolchain, component)
    management  install / ensure component / uninstall
    runner      the single place rustup subprocesses are started
"""

from chainboot.core.services.toolchain.detection import (
    get_toolchain_status,
    manager_available,
    probe_component,
    probe_toolchain,
)
from chainboot.core.services.toolchain.management import (
    decide_install,
    ensure_component,
    install_toolchain,
    uninstall_toolchain,
)

__all__ = [
    "decide_install",
    "ensure_component",
    "get_toolchain_status",
    "install_toolchain",
    "manager_available",
    "probe_component",
    "probe_toolchain",
    "uninstall_toolchain",
]
