"""
Shared helpers for CLI command modules.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click

from chainboot.core.config.loader import ConfigError, load_config
from chainboot.core.models.config import BootstrapConfig

_REPORT_STYLES = {
    "ok": ("✅", "green"),
    "info": ("ℹ️ ", None),
    "warn": ("⚠️ ", "yellow"),
    "error": ("❌", "red"),
}


def load_cli_config(ctx: click.Context, **overrides: Any) -> BootstrapConfig:
    """Load config from ``--config`` (or search), exiting 1 when invalid."""
    config_path: Path | None = (ctx.obj or {}).get("config_path")
    try:
        return load_config(config_path, overrides=overrides)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


def report(level: str, message: str) -> None:
    """Print a progress line for the operator."""
    icon, color = _REPORT_STYLES.get(level, ("•", None))
    click.secho(f"{icon} {message}", fg=color)
