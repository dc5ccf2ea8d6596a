"""
Bootstrap configuration model — the pinned toolchain and analyzer layout.

Loaded from chainboot.yml (or built from defaults when no file exists),
this is the single source for every identifier the orchestrator passes
to rustup and cargo.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class ArgumentStyle(str, Enum):
    """How analyzer arguments are shaped for the two deployment layouts.

    ``subdir``: cargo runs inside the analyzer directory, paths are
    re-rooted to the invocation directory, the flag is a bare ``keep``.

    ``local``: cargo runs in the invocation directory against the
    analyzer's manifest, paths are passed as typed, the flag is ``--call``.
    """

    SUBDIR = "subdir"
    LOCAL = "local"

    @property
    def flag_token(self) -> str:
        return "keep" if self is ArgumentStyle.SUBDIR else "--call"

    @property
    def runs_in_subdir(self) -> bool:
        return self is ArgumentStyle.SUBDIR


class ParameterDefaults(BaseModel):
    """Values used when the operator just presses Enter."""

    manifest: str = "Cargo.toml"
    output: str = "graph.dot"
    call_graph: bool = False

    @field_validator("manifest", "output")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default must not be empty")
        return v


class BootstrapConfig(BaseModel):
    """Everything the orchestrator needs to know before the first prompt."""

    version_manager: str = "rustup"
    toolchain: str = "nightly-2024-06-30"   # pinned, date-stamped channel
    component: str = "rustc-dev"
    build_tool: str = "cargo"
    analyzer_dir: str = "analyzer"
    style: ArgumentStyle = ArgumentStyle.SUBDIR
    release: bool = False
    defaults: ParameterDefaults = Field(default_factory=ParameterDefaults)

    @field_validator("version_manager", "toolchain", "component", "build_tool")
    @classmethod
    def _identifier_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v
