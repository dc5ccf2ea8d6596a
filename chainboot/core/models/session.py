"""
Session models — the transient state of one bootstrap run.

Nothing here is persisted. A SessionState is created when ``run``
starts, filled in stage by stage, and dropped at process exit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from pydantic import BaseModel


class PresenceResult(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


class InstallDecision(str, Enum):
    SKIP = "skip"
    INSTALL = "install"


class BootstrapStage(str, Enum):
    """Stages of the orchestration state machine, in traversal order."""

    PROBING = "probing"
    SKIP_INSTALL = "skip_install"
    AWAIT_INSTALL = "await_install"
    INSTALLING = "installing"
    ENSURE_COMPONENT = "ensure_component"
    READY = "ready"
    COLLECTING = "collecting"
    INVOKING = "invoking"
    NO_CLEANUP = "no_cleanup"
    AWAIT_CLEANUP = "await_cleanup"
    UNINSTALLING = "uninstalling"
    DONE = "done"


class ParameterSpec(BaseModel):
    """A parameter the operator is asked for.

    ``free_text`` parameters become positional analyzer arguments.
    ``flag`` parameters contribute ``token`` when answered yes.
    """

    name: str
    prompt: str
    default: str | bool
    kind: Literal["free_text", "flag"] = "free_text"
    token: str | None = None   # flag only


@dataclass(frozen=True)
class ParameterValue:
    """A collected parameter: identity, effective value, declared default."""

    name: str
    value: str | bool
    default: str | bool
    kind: str = "free_text"
    token: str | None = None


@dataclass
class SessionState:
    """Working state of one run. Owned by the orchestrator only."""

    dependency_present: bool = False
    installed_by_this_run: bool = False
    parameters: list[ParameterValue] = field(default_factory=list)
    tool_arguments: list[str] = field(default_factory=list)
    stage: BootstrapStage = BootstrapStage.PROBING
    exit_code: int = 0
    cleanup_error: str | None = None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "dependency_present": self.dependency_present,
            "installed_by_this_run": self.installed_by_this_run,
            "parameters": [
                {"name": p.name, "value": p.value, "default": p.default}
                for p in self.parameters
            ],
            "tool_arguments": list(self.tool_arguments),
            "stage": self.stage.value,
            "exit_code": self.exit_code,
            "cleanup_error": self.cleanup_error,
        }
