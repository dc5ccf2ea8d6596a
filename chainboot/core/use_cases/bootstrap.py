"""
Bootstrap use case — the full interactive run.

    probe → install? → ensure component → collect → invoke → uninstall?

Fatal failures raise a ``BootstrapError`` subclass and stop the run
where they happen. A failed or unlaunchable analyzer is recorded in the
session's exit code, and cleanup is still offered afterwards. Cleanup
failures are reported and never change the outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chainboot.core.errors import (
    CleanupFailure,
    ComponentEnsureFailure,
    FatalPrecondition,
    InstallFailure,
    InvocationFailure,
)
from chainboot.core.models.config import BootstrapConfig
from chainboot.core.models.session import (
    BootstrapStage,
    InstallDecision,
    PresenceResult,
    SessionState,
)
from chainboot.core.services import invoker, prompts
from chainboot.core.services.parameters import build_arguments, collect, default_parameters
from chainboot.core.services.toolchain import (
    decide_install,
    ensure_component,
    install_toolchain,
    manager_available,
    probe_toolchain,
    uninstall_toolchain,
)

logger = logging.getLogger(__name__)

# (level, message) with level one of "info", "ok", "warn", "error"
Reporter = Callable[[str, str], None]

_LOG_LEVELS = {"info": logging.INFO, "ok": logging.INFO, "warn": logging.WARNING, "error": logging.ERROR}


def _log_report(level: str, message: str) -> None:
    logger.log(_LOG_LEVELS.get(level, logging.INFO), message)


def run_bootstrap(
    config: BootstrapConfig,
    *,
    confirm: Callable[[str, bool], bool] = prompts.confirm,
    ask_text: Callable[[str, str], str] = prompts.ask_text,
    report: Reporter = _log_report,
    invocation_dir: str | None = None,
) -> SessionState:
    """Drive one bootstrap session from probe to cleanup.

    Args:
        config: Pinned toolchain and analyzer layout.
        confirm: Yes/no question callback ``(text, default) -> bool``.
        ask_text: Free-text question callback ``(text, default) -> str``.
        report: Progress sink for operator-facing messages.
        invocation_dir: Directory the operator ran from (default: cwd).

    Returns:
        The finished SessionState; ``exit_code`` mirrors the analyzer.

    Raises:
        FatalPrecondition: The version manager is not available.
        InstallFailure: The toolchain install failed.
        ComponentEnsureFailure: The component could not be added.
    """
    session = SessionState()

    _prepare_toolchain(config, session, confirm, report)

    session.stage = BootstrapStage.COLLECTING
    session.parameters = collect(
        default_parameters(config), ask_text=ask_text, ask_flag=confirm,
    )
    session.tool_arguments = build_arguments(
        session.parameters,
        config.style,
        analyzer_dir=config.analyzer_dir,
        invocation_dir=invocation_dir,
    )

    session.stage = BootstrapStage.INVOKING
    report("info", f"Running analyzer with: {' '.join(session.tool_arguments)}")
    try:
        session.exit_code = invoker.invoke(
            config, session.tool_arguments, invocation_dir=invocation_dir,
        )
    except InvocationFailure as e:
        session.exit_code = e.exit_code
        report("error", e.message)
    else:
        if session.exit_code == 0:
            report("ok", "Analyzer finished")
        else:
            report("error", f"Analyzer exited with code {session.exit_code}")

    _offer_cleanup(config, session, confirm, report)

    session.stage = BootstrapStage.DONE
    return session


def _prepare_toolchain(
    config: BootstrapConfig,
    session: SessionState,
    confirm: Callable[[str, bool], bool],
    report: Reporter,
) -> None:
    session.stage = BootstrapStage.PROBING
    if not manager_available(config):
        raise FatalPrecondition(
            f"{config.version_manager} was not found. "
            f"Install it first (https://rustup.rs) and re-run.",
        )

    presence = probe_toolchain(config)
    session.dependency_present = presence is PresenceResult.PRESENT

    if session.dependency_present:
        session.stage = BootstrapStage.SKIP_INSTALL
        report("ok", f"Toolchain {config.toolchain} is already installed")
    else:
        session.stage = BootstrapStage.AWAIT_INSTALL

    decision = decide_install(
        presence,
        lambda: confirm(f"Toolchain {config.toolchain} is not installed. Install it?", True),
    )

    if decision is InstallDecision.INSTALL:
        session.stage = BootstrapStage.INSTALLING
        result = install_toolchain(config)
        if not result["ok"]:
            raise InstallFailure(
                f"Installing {config.toolchain} failed: {result['error']}",
                detail=result.get("stderr", ""),
            )
        session.installed_by_this_run = True
        report("ok", result["message"])
    elif not session.dependency_present:
        report("warn", f"Continuing without installing {config.toolchain}")

    session.stage = BootstrapStage.ENSURE_COMPONENT
    result = ensure_component(config)
    if not result["ok"]:
        raise ComponentEnsureFailure(
            f"Adding {config.component} to {config.toolchain} failed: {result['error']}",
            detail=result.get("stderr", ""),
        )

    session.stage = BootstrapStage.READY


def _offer_cleanup(
    config: BootstrapConfig,
    session: SessionState,
    confirm: Callable[[str, bool], bool],
    report: Reporter,
) -> None:
    if not session.installed_by_this_run:
        session.stage = BootstrapStage.NO_CLEANUP
        return

    session.stage = BootstrapStage.AWAIT_CLEANUP
    if not confirm(f"Uninstall {config.toolchain}, which this run installed?", True):
        session.stage = BootstrapStage.NO_CLEANUP
        report("info", f"Keeping {config.toolchain}")
        return

    session.stage = BootstrapStage.UNINSTALLING
    result = uninstall_toolchain(config)
    if result["ok"]:
        report("ok", result["message"])
        return

    failure = CleanupFailure(
        f"Could not uninstall {config.toolchain}: {result['error']}. "
        f"Remove it manually with: {result.get('manual_command', '')}",
    )
    session.cleanup_error = failure.message
    report("warn", failure.message)
