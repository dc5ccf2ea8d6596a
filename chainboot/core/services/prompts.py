"""
Operator prompts — a validated-input loop on top of click.prompt.

Every question the bootstrap asks goes through ``ask_until_valid``:
read a line, hand it to a parser, re-ask on ``ValueError``. Empty input
is passed to the parser as ``""`` so defaults stay the parser's call.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import click

T = TypeVar("T")

YES = frozenset({"y", "yes"})
NO = frozenset({"n", "no"})


def ask_until_valid(text: str, parse: Callable[[str], T], *, hint: str = "") -> T:
    """Prompt until ``parse`` accepts the answer.

    Args:
        text: Question shown to the operator.
        parse: Maps the raw line to a value, raising ValueError to re-ask.
        hint: Shown in brackets after the question (default / choices).

    Raises:
        click.Abort: On EOF or Ctrl-C.
    """
    question = f"{text} [{hint}]" if hint else text
    while True:
        raw = click.prompt(question, default="", show_default=False)
        try:
            return parse(raw)
        except ValueError as e:
            click.secho(f"   {e}", fg="yellow")


def parse_yes_no(default: bool) -> Callable[[str], bool]:
    """Build a parser accepting y/yes/n/no in any case; empty means ``default``."""

    def parse(raw: str) -> bool:
        answer = raw.strip().lower()
        if not answer:
            return default
        if answer in YES:
            return True
        if answer in NO:
            return False
        raise ValueError(f"Please answer yes or no (got {raw.strip()!r}).")

    return parse


def parse_text(default: str) -> Callable[[str], str]:
    """Build a parser that returns the trimmed answer, or ``default`` when blank."""

    def parse(raw: str) -> str:
        return raw.strip() or default

    return parse


def confirm(text: str, default: bool = True) -> bool:
    return ask_until_valid(text, parse_yes_no(default), hint="Y/n" if default else "y/N")


def ask_text(text: str, default: str) -> str:
    return ask_until_valid(text, parse_text(default), hint=default)
