"""
Parameter collection and analyzer argument shaping.

The analyzer reads its arguments positionally: manifest path, output
path, then an optional mode flag. Collection order therefore equals
emission order, and ``default_parameters`` is the single place that
order is declared.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from chainboot.core.models.config import ArgumentStyle, BootstrapConfig
from chainboot.core.models.session import ParameterSpec, ParameterValue
from chainboot.core.services import prompts

logger = logging.getLogger(__name__)


def default_parameters(config: BootstrapConfig) -> list[ParameterSpec]:
    """The analyzer's parameters, in the order it expects them."""
    return [
        ParameterSpec(
            name="manifest",
            prompt="Path to the Cargo.toml of the crate to analyze",
            default=config.defaults.manifest,
        ),
        ParameterSpec(
            name="output",
            prompt="Where to write the DOT graph",
            default=config.defaults.output,
        ),
        ParameterSpec(
            name="call_graph",
            prompt="Output the full call graph instead of propagation chains?",
            default=config.defaults.call_graph,
            kind="flag",
            token=config.style.flag_token,
        ),
    ]


def collect(
    specs: list[ParameterSpec],
    *,
    ask_text: Callable[[str, str], str] = prompts.ask_text,
    ask_flag: Callable[[str, bool], bool] = prompts.confirm,
) -> list[ParameterValue]:
    """Ask the operator for each parameter in declaration order.

    Free-text answers fall back to the declared default verbatim when
    left empty. Paths are not checked here; the analyzer reports them.
    """
    values: list[ParameterValue] = []
    for spec in specs:
        if spec.kind == "flag":
            value: str | bool = ask_flag(spec.prompt, bool(spec.default))
        else:
            value = ask_text(spec.prompt, str(spec.default)) or str(spec.default)
        logger.debug("Parameter %s = %r", spec.name, value)
        values.append(
            ParameterValue(
                name=spec.name,
                value=value,
                default=spec.default,
                kind=spec.kind,
                token=spec.token,
            )
        )
    return values


def build_arguments(
    values: list[ParameterValue],
    style: ArgumentStyle,
    *,
    analyzer_dir: str,
    invocation_dir: str | None = None,
) -> list[str]:
    """Derive the analyzer's argument vector.

    Positional values come first in collection order, followed by the
    tokens of every flag answered yes, in declaration order. With the
    ``subdir`` style, relative paths are re-rooted so they still point
    at the operator's files once cargo runs inside ``analyzer_dir``.
    """
    base = invocation_dir or os.getcwd()
    rebase = ""
    if style.runs_in_subdir:
        rebase = os.path.relpath(base, os.path.join(base, analyzer_dir))

    positional: list[str] = []
    flags: list[str] = []
    for item in values:
        if item.kind == "flag":
            if item.value is True and item.token:
                flags.append(item.token)
            continue
        path = str(item.value)
        if rebase and rebase != os.curdir and not os.path.isabs(path):
            path = os.path.join(rebase, path)
        positional.append(path)

    return positional + flags
