"""
Toolchain management — install, ensure component, uninstall.

Each operation returns a receipt dict and never raises. Whether a
failure is fatal is decided by the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from chainboot.core.models.config import BootstrapConfig
from chainboot.core.models.session import InstallDecision, PresenceResult
from chainboot.core.services.toolchain.runner import run_attached

logger = logging.getLogger(__name__)

INSTALL_TIMEOUT = 1800
COMPONENT_TIMEOUT = 900
UNINSTALL_TIMEOUT = 1800


def decide_install(presence: PresenceResult, confirm) -> InstallDecision:
    """Map the probe result and operator answer to an install decision.

    ``confirm`` is only called when the toolchain is absent. It must
    return True (install) or False (skip).
    """
    if presence is PresenceResult.PRESENT:
        return InstallDecision.SKIP
    return InstallDecision.INSTALL if confirm() else InstallDecision.SKIP


def install_toolchain(config: BootstrapConfig) -> dict[str, Any]:
    """Install the pinned toolchain with the minimal profile."""
    cmd = [
        config.version_manager, "toolchain", "install", config.toolchain,
        "--profile", "minimal",
    ]
    logger.info("Installing toolchain %s", config.toolchain)
    result = run_attached(cmd, timeout=INSTALL_TIMEOUT)
    if result["ok"]:
        result["message"] = f"{config.toolchain} installed"
    else:
        logger.error("Toolchain install failed: %s", result["error"])
    return result


def ensure_component(config: BootstrapConfig) -> dict[str, Any]:
    """Add the required component. A no-op when it is already present."""
    cmd = [
        config.version_manager, "component", "add", config.component,
        "--toolchain", config.toolchain,
    ]
    logger.info("Ensuring component %s on %s", config.component, config.toolchain)
    # Must not pull in the toolchain itself when the operator skipped the install
    result = run_attached(
        cmd, timeout=COMPONENT_TIMEOUT, env_overrides={"RUSTUP_AUTO_INSTALL": "0"},
    )
    if result["ok"]:
        result["message"] = f"{config.component} present on {config.toolchain}"
    else:
        logger.error("Component add failed: %s", result["error"])
    return result


def uninstall_toolchain(config: BootstrapConfig) -> dict[str, Any]:
    """Remove the pinned toolchain."""
    cmd = [config.version_manager, "toolchain", "uninstall", config.toolchain]
    logger.info("Uninstalling toolchain %s", config.toolchain)
    result = run_attached(cmd, timeout=UNINSTALL_TIMEOUT)
    if result["ok"]:
        result["message"] = f"{config.toolchain} removed"
    else:
        result["manual_command"] = " ".join(cmd)
        logger.warning("Toolchain uninstall failed: %s", result["error"])
    return result
