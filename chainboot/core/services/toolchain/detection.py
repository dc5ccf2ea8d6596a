"""
Toolchain detection — read-only probes against rustup.

None of these functions change the host. A failed probe means
"not installed", never an error; only a missing version manager is
treated as fatal, and that decision belongs to the orchestrator.
"""

from __future__ import annotations

import re
import shutil
from typing import Any

from chainboot.core.models.config import BootstrapConfig
from chainboot.core.models.session import PresenceResult
from chainboot.core.services.toolchain.runner import run_captured

PROBE_TIMEOUT = 30

# rustup would otherwise fetch a missing toolchain on first use
_NO_AUTO_INSTALL = {"RUSTUP_AUTO_INSTALL": "0"}

_VERSION_RE = re.compile(r"rustup\s+(\d+\.\d+\.\d+)")


def manager_available(config: BootstrapConfig) -> bool:
    """Whether the version manager is on PATH and answers ``--version``."""
    if not shutil.which(config.version_manager):
        return False
    result = run_captured([config.version_manager, "--version"], timeout=PROBE_TIMEOUT)
    return result["ok"]


def get_manager_version(config: BootstrapConfig) -> str | None:
    """Semver of the version manager, or None if unknown."""
    if not shutil.which(config.version_manager):
        return None
    result = run_captured([config.version_manager, "--version"], timeout=PROBE_TIMEOUT)
    if not result["ok"]:
        return None
    match = _VERSION_RE.search(result.get("stdout", ""))
    return match.group(1) if match else None


def probe_toolchain(config: BootstrapConfig) -> PresenceResult:
    """Is the pinned toolchain registered with the version manager?"""
    result = run_captured(
        [config.version_manager, "which", "rustc", "--toolchain", config.toolchain],
        timeout=PROBE_TIMEOUT,
        env_overrides=_NO_AUTO_INSTALL,
    )
    return PresenceResult.PRESENT if result["ok"] else PresenceResult.ABSENT


def probe_component(config: BootstrapConfig) -> PresenceResult:
    """Is the required component installed for the pinned toolchain?"""
    result = run_captured(
        [
            config.version_manager, "component", "list",
            "--installed", "--toolchain", config.toolchain,
        ],
        timeout=PROBE_TIMEOUT,
        env_overrides=_NO_AUTO_INSTALL,
    )
    if not result["ok"]:
        return PresenceResult.ABSENT

    # Lines look like "rustc-dev-x86_64-unknown-linux-gnu"
    for line in result.get("stdout", "").splitlines():
        name = line.strip()
        if name == config.component or name.startswith(config.component + "-"):
            return PresenceResult.PRESENT
    return PresenceResult.ABSENT


def get_toolchain_status(config: BootstrapConfig) -> dict[str, Any]:
    """Read-only summary of everything the bootstrap depends on."""
    available = manager_available(config)
    status: dict[str, Any] = {
        "version_manager": config.version_manager,
        "manager_available": available,
        "manager_version": get_manager_version(config) if available else None,
        "toolchain": config.toolchain,
        "toolchain_present": False,
        "component": config.component,
        "component_present": False,
    }
    if not available:
        return status

    if probe_toolchain(config) is PresenceResult.PRESENT:
        status["toolchain_present"] = True
        status["component_present"] = probe_component(config) is PresenceResult.PRESENT
    return status
