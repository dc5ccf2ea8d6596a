"""
Analyzer invocation — run the analyzer through cargo on the pinned toolchain.

The analyzer shares the operator's terminal: its stdin, stdout and
stderr are inherited, and the call blocks until it exits.
"""

from __future__ import annotations

import logging
import os
import subprocess

from chainboot.core.errors import InvocationFailure
from chainboot.core.models.config import BootstrapConfig

logger = logging.getLogger(__name__)

LAUNCH_FAILED = 127


def build_command(config: BootstrapConfig, arguments: list[str]) -> list[str]:
    """Full command line: ``rustup run <toolchain> cargo run [...] -- <arguments>``."""
    cmd = [config.version_manager, "run", config.toolchain, config.build_tool, "run"]
    if config.release:
        cmd.append("--release")
    if not config.style.runs_in_subdir:
        cmd += ["--manifest-path", os.path.join(config.analyzer_dir, "Cargo.toml")]
    return cmd + ["--"] + list(arguments)


def working_directory(config: BootstrapConfig, invocation_dir: str | None = None) -> str:
    """Directory cargo runs in for the configured argument style."""
    base = invocation_dir or os.getcwd()
    if config.style.runs_in_subdir:
        return os.path.join(base, config.analyzer_dir)
    return base


def invoke(
    config: BootstrapConfig,
    arguments: list[str],
    *,
    invocation_dir: str | None = None,
) -> int:
    """Run the analyzer and return its exit code.

    Raises:
        InvocationFailure: If the process could not be started at all.
    """
    cmd = build_command(config, arguments)
    cwd = working_directory(config, invocation_dir)
    logger.info("Invoking analyzer: %s (cwd=%s)", " ".join(cmd), cwd)

    try:
        completed = subprocess.run(cmd, cwd=cwd)
    except OSError as e:
        raise InvocationFailure(
            f"Could not launch the analyzer: {e}",
            exit_code=LAUNCH_FAILED,
            detail=" ".join(cmd),
        ) from e

    logger.info("Analyzer exited with %d", completed.returncode)
    return completed.returncode
