"""
Domain models — Pydantic types and session state for chainboot.

    from chainboot.core.models import BootstrapConfig, SessionState
"""

from chainboot.core.models.config import ArgumentStyle, BootstrapConfig, ParameterDefaults
from chainboot.core.models.session import (
    BootstrapStage,
    InstallDecision,
    ParameterSpec,
    ParameterValue,
    PresenceResult,
    SessionState,
)

__all__ = [
    # config.py
    "ArgumentStyle",
    "BootstrapConfig",
    # session.py
    "BootstrapStage",
    "InstallDecision",
    "ParameterDefaults",
    "ParameterSpec",
    "ParameterValue",
    "PresenceResult",
    "SessionState",
]
