"""
Tests for parameter collection and argument shaping.
"""

from chainboot.core.models.config import ArgumentStyle, BootstrapConfig, ParameterDefaults
from chainboot.core.models.session import ParameterValue
from chainboot.core.services.parameters import build_arguments, collect, default_parameters


def _answers(texts=(), flags=()):
    """Scripted operator: returns queued answers, or the default when exhausted."""
    texts, flags = list(texts), list(flags)

    def ask_text(prompt, default):
        return texts.pop(0) if texts else default

    def ask_flag(prompt, default):
        return flags.pop(0) if flags else default

    return ask_text, ask_flag


def _collect(config, texts=(), flags=()):
    ask_text, ask_flag = _answers(texts, flags)
    return collect(default_parameters(config), ask_text=ask_text, ask_flag=ask_flag)


# ── Specs ────────────────────────────────────────────────────────────


class TestDefaultParameters:
    def test_order_matches_analyzer_positions(self, config):
        names = [p.name for p in default_parameters(config)]
        assert names == ["manifest", "output", "call_graph"]

    def test_defaults(self, config):
        specs = {p.name: p for p in default_parameters(config)}
        assert specs["manifest"].default == "Cargo.toml"
        assert specs["output"].default == "graph.dot"
        assert specs["call_graph"].default is False
        assert specs["call_graph"].kind == "flag"

    def test_flag_token_follows_style(self, config, local_config):
        assert default_parameters(config)[2].token == "keep"
        assert default_parameters(local_config)[2].token == "--call"

    def test_configured_defaults(self):
        cfg = BootstrapConfig(defaults=ParameterDefaults(manifest="a/Cargo.toml", output="out.dot"))
        specs = default_parameters(cfg)
        assert specs[0].default == "a/Cargo.toml"
        assert specs[1].default == "out.dot"


# ── Collection ───────────────────────────────────────────────────────


class TestCollect:
    def test_empty_answers_yield_defaults(self, config):
        values = _collect(config, texts=["", ""])
        assert [v.value for v in values] == ["Cargo.toml", "graph.dot", False]
        assert all(v.value == v.default for v in values)

    def test_override(self, config):
        values = _collect(config, texts=["sub/Manifest.toml"], flags=[True])
        assert values[0].value == "sub/Manifest.toml"
        assert values[0].default == "Cargo.toml"
        assert values[1].value == "graph.dot"
        assert values[2].value is True

    def test_prompts_asked_in_order(self, config):
        asked = []

        def ask_text(prompt, default):
            asked.append(("text", default))
            return default

        def ask_flag(prompt, default):
            asked.append(("flag", default))
            return default

        collect(default_parameters(config), ask_text=ask_text, ask_flag=ask_flag)
        assert asked == [("text", "Cargo.toml"), ("text", "graph.dot"), ("flag", False)]


# ── Argument vector ──────────────────────────────────────────────────


class TestBuildArguments:
    def test_scenario_a_local(self, local_config, tmp_path):
        values = _collect(local_config)
        args = build_arguments(values, ArgumentStyle.LOCAL,
                               analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        assert args == ["Cargo.toml", "graph.dot"]

    def test_scenario_a_subdir(self, config, tmp_path):
        values = _collect(config)
        args = build_arguments(values, ArgumentStyle.SUBDIR,
                               analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        assert args == ["../Cargo.toml", "../graph.dot"]

    def test_scenario_b_local(self, local_config, tmp_path):
        values = _collect(local_config, texts=["sub/Manifest.toml"], flags=[True])
        args = build_arguments(values, ArgumentStyle.LOCAL,
                               analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        assert args == ["sub/Manifest.toml", "graph.dot", "--call"]

    def test_scenario_b_subdir(self, config, tmp_path):
        values = _collect(config, texts=["sub/Manifest.toml"], flags=[True])
        args = build_arguments(values, ArgumentStyle.SUBDIR,
                               analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        assert args == ["../sub/Manifest.toml", "../graph.dot", "keep"]

    def test_nested_analyzer_dir(self, config, tmp_path):
        values = _collect(config)
        args = build_arguments(values, ArgumentStyle.SUBDIR,
                               analyzer_dir="tools/analyzer", invocation_dir=str(tmp_path))
        assert args == ["../../Cargo.toml", "../../graph.dot"]

    def test_absolute_paths_untouched(self, config, tmp_path):
        values = _collect(config, texts=["/srv/crate/Cargo.toml", "/tmp/out.dot"])
        args = build_arguments(values, ArgumentStyle.SUBDIR,
                               analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        assert args == ["/srv/crate/Cargo.toml", "/tmp/out.dot"]

    def test_flag_appears_once(self, local_config, tmp_path):
        values = _collect(local_config, flags=[True])
        args = build_arguments(values, ArgumentStyle.LOCAL,
                               analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        assert args.count("--call") == 1
        assert args[-1] == "--call"

    def test_flags_after_positionals(self, tmp_path):
        values = [
            ParameterValue(name="mode", value=True, default=False, kind="flag", token="--x"),
            ParameterValue(name="manifest", value="Cargo.toml", default="Cargo.toml"),
            ParameterValue(name="verbose", value=True, default=False, kind="flag", token="--y"),
            ParameterValue(name="output", value="g.dot", default="graph.dot"),
        ]
        args = build_arguments(values, ArgumentStyle.LOCAL,
                               analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        assert args == ["Cargo.toml", "g.dot", "--x", "--y"]

    def test_deterministic(self, config, tmp_path):
        values = _collect(config, texts=["sub/Manifest.toml"], flags=[True])
        first = build_arguments(values, ArgumentStyle.SUBDIR,
                                analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        second = build_arguments(values, ArgumentStyle.SUBDIR,
                                 analyzer_dir="analyzer", invocation_dir=str(tmp_path))
        assert first == second
        assert first is not second
