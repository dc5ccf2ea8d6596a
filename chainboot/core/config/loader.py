"""
Configuration loader — reads chainboot.yml into a BootstrapConfig.

The file is optional. Without one, the built-in defaults pin the
toolchain and analyzer layout. With one, its keys override the
defaults and are validated by the pydantic model.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chainboot.core.models.config import BootstrapConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "chainboot.yml"


class ConfigError(Exception):
    """Raised when chainboot.yml exists but cannot be used."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for chainboot.yml from ``start_dir`` (default: cwd) upward.

    Returns:
        Path to the file, or None if no ancestor has one.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(
    path: Path | None = None,
    *,
    search: bool = True,
    overrides: dict[str, Any] | None = None,
) -> BootstrapConfig:
    """Load and validate the bootstrap configuration.

    Args:
        path: Explicit config path. Must exist when given.
        search: Walk up from cwd for chainboot.yml when ``path`` is None.
        overrides: Values from the command line; ``None`` entries are ignored.

    Raises:
        ConfigError: If the file is missing (explicit path), unreadable or invalid.
    """
    data: dict[str, Any] = {}

    if path is None and search:
        path = find_config_file()

    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        data = _read_yaml(path)
        logger.debug("Loaded config from %s", path)
    else:
        logger.debug("No %s found, using built-in defaults", CONFIG_FILE)

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        config = BootstrapConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    logger.info(
        "Toolchain %s (+%s), analyzer at %s, style %s",
        config.toolchain, config.component, config.analyzer_dir, config.style.value,
    )
    return config


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Settings may sit under a "chainboot" key or at top level
    nested = data.get("chainboot")
    if isinstance(nested, dict):
        return dict(nested)
    return data
