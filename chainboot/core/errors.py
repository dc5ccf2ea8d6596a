"""
Error taxonomy for a bootstrap run.

Every failure the orchestrator can hit maps to one of these. Fatal kinds
carry the process exit code the CLI should use; CleanupFailure is the
only non-fatal kind and is reported without changing the outcome.
"""

from __future__ import annotations


class BootstrapError(Exception):
    """Base class for orchestration failures."""

    exit_code: int = 1
    fatal: bool = True

    def __init__(self, message: str, *, detail: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class FatalPrecondition(BootstrapError):
    """The version manager itself is missing. Nothing else can run."""

    exit_code = 2


class InstallFailure(BootstrapError):
    """Installing the pinned toolchain failed."""

    exit_code = 3


class ComponentEnsureFailure(BootstrapError):
    """Adding the required toolchain component failed."""

    exit_code = 4


class InvocationFailure(BootstrapError):
    """The analyzer exited non-zero or could not be launched."""

    def __init__(self, message: str, *, exit_code: int, detail: str = "") -> None:
        super().__init__(message, detail=detail)
        self.exit_code = exit_code


class CleanupFailure(BootstrapError):
    """Uninstalling the toolchain failed. Reported, never fatal."""

    fatal = False
