"""
Tests for configuration loading — chainboot.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from chainboot.core.config.loader import ConfigError, find_config_file, load_config
from chainboot.core.models.config import ArgumentStyle


@pytest.fixture
def flat_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        toolchain: nightly-2024-01-01
        analyzer_dir: tools/analyzer
        style: local
        defaults:
          manifest: crates/app/Cargo.toml
          call_graph: true
    """)
    path = tmp_path / "chainboot.yml"
    path.write_text(content)
    return path


@pytest.fixture
def nested_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        chainboot:
          component: llvm-tools-preview
          release: true
    """)
    path = tmp_path / "chainboot.yml"
    path.write_text(content)
    return path


class TestLoadConfig:
    def test_defaults_without_file(self, isolated_cwd):
        cfg = load_config()
        assert cfg.version_manager == "rustup"
        assert cfg.toolchain.startswith("nightly-")
        assert cfg.component == "rustc-dev"
        assert cfg.style is ArgumentStyle.SUBDIR
        assert cfg.defaults.manifest == "Cargo.toml"
        assert cfg.defaults.output == "graph.dot"
        assert cfg.defaults.call_graph is False

    def test_flat(self, flat_yml):
        cfg = load_config(flat_yml)
        assert cfg.toolchain == "nightly-2024-01-01"
        assert cfg.analyzer_dir == "tools/analyzer"
        assert cfg.style is ArgumentStyle.LOCAL
        assert cfg.defaults.manifest == "crates/app/Cargo.toml"
        assert cfg.defaults.output == "graph.dot"
        assert cfg.defaults.call_graph is True

    def test_nested(self, nested_yml):
        cfg = load_config(nested_yml)
        assert cfg.component == "llvm-tools-preview"
        assert cfg.release is True

    def test_overrides_win(self, flat_yml):
        cfg = load_config(flat_yml, overrides={"style": "subdir", "toolchain": None})
        assert cfg.style is ArgumentStyle.SUBDIR
        assert cfg.toolchain == "nightly-2024-01-01"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "chainboot.yml"
        path.write_text("")
        assert load_config(path).version_manager == "rustup"

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "chainboot.yml"
        path.write_text("toolchain: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "chainboot.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_style(self, tmp_path):
        path = tmp_path / "chainboot.yml"
        path.write_text("style: sideways\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_empty_default_rejected(self, tmp_path):
        path = tmp_path / "chainboot.yml"
        path.write_text("defaults:\n  output: ''\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_empty_toolchain_rejected(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(None, search=False, overrides={"toolchain": "  "})


class TestFindConfigFile:
    def test_walks_up(self, flat_yml):
        nested = flat_yml.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == flat_yml.resolve()

    def test_none_when_absent(self, isolated_cwd):
        assert find_config_file(isolated_cwd) is None
