"""
Subprocess runner for version-manager commands.

The only place where rustup is executed. Captured runs return a
receipt dict (``{"ok": True, ...}`` / ``{"ok": False, "error": ...}``)
and never raise. Attached runs share the operator's terminal.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from typing import Any

logger = logging.getLogger(__name__)

_TAIL = 2000


def run_captured(
    cmd: list[str],
    *,
    timeout: int = 120,
    env_overrides: dict[str, str] | None = None,
    cwd: str | None = None,
) -> dict[str, Any]:
    """Run a command with output captured and stdin detached.

    Stdin is closed so that a command which unexpectedly wants input
    fails instead of hanging the run.

    Returns:
        ``{"ok": True, "stdout": "...", "elapsed_ms": N}`` on success,
        ``{"ok": False, "error": "...", "returncode": N, ...}`` otherwise.
    """
    env = os.environ.copy()
    if env_overrides:
        env.update(env_overrides)

    logger.debug("Running: %s", " ".join(cmd))
    start = time.monotonic()
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
            env=env,
            cwd=cwd,
        )
    except subprocess.TimeoutExpired:
        return {"ok": False, "error": f"Command timed out ({timeout}s)", "returncode": None}
    except OSError as e:
        logger.debug("Launch failed for %s: %s", cmd[0], e)
        return {"ok": False, "error": f"Cannot run {cmd[0]}: {e}", "returncode": None}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = result.stdout[-_TAIL:] if result.stdout else ""

    if result.returncode == 0:
        return {"ok": True, "stdout": stdout, "elapsed_ms": elapsed_ms, "returncode": 0}

    return {
        "ok": False,
        "error": f"Command failed (exit {result.returncode})",
        "returncode": result.returncode,
        "stderr": result.stderr[-_TAIL:] if result.stderr else "",
        "stdout": stdout,
        "elapsed_ms": elapsed_ms,
    }


def run_attached(
    cmd: list[str],
    *,
    timeout: int | None = None,
    env_overrides: dict[str, str] | None = None,
    cwd: str | None = None,
) -> dict[str, Any]:
    """Run a command on the operator's terminal and wait for it.

    Used for the long installs, so rustup's progress output stays
    visible. Receipt shape matches ``run_captured`` without output.
    """
    env = None
    if env_overrides:
        env = os.environ.copy()
        env.update(env_overrides)

    logger.debug("Running (attached): %s", " ".join(cmd))
    start = time.monotonic()
    try:
        result = subprocess.run(cmd, timeout=timeout, env=env, cwd=cwd)
    except subprocess.TimeoutExpired:
        return {"ok": False, "error": f"Command timed out ({timeout}s)", "returncode": None}
    except OSError as e:
        return {"ok": False, "error": f"Cannot run {cmd[0]}: {e}", "returncode": None}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    if result.returncode == 0:
        return {"ok": True, "elapsed_ms": elapsed_ms, "returncode": 0}
    return {
        "ok": False,
        "error": f"Command failed (exit {result.returncode})",
        "returncode": result.returncode,
        "elapsed_ms": elapsed_ms,
    }
