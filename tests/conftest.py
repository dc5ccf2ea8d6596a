"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from chainboot.core.models.config import ArgumentStyle, BootstrapConfig


@pytest.fixture
def config() -> BootstrapConfig:
    """Default configuration (subdir style)."""
    return BootstrapConfig()


@pytest.fixture
def local_config() -> BootstrapConfig:
    """Configuration using the invocation-relative convention."""
    return BootstrapConfig(style=ArgumentStyle.LOCAL)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory so no chainboot.yml is picked up."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir

