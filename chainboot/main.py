"""
chainboot — CLI entrypoint.

Usage:
    chainboot --help
    chainboot run
    chainboot toolchain status
    chainboot config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from chainboot import __version__
from chainboot.core.models.config import ArgumentStyle
from chainboot.core.observability.logging_config import ENV_FILE, ENV_FILE_LEVEL, resolve_level, setup_logging
from chainboot.ui.cli.helpers import load_cli_config, report


@click.group()
@click.version_option(version=__version__, prog_name="chainboot")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to chainboot.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """chainboot — set up the toolchain and run the error-propagation analyzer."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


@cli.command()
@click.option(
    "--style",
    type=click.Choice([s.value for s in ArgumentStyle]),
    default=None,
    help="Argument convention: 'subdir' (keep) or 'local' (--call).",
)
@click.option("--toolchain", default=None, help="Override the pinned toolchain.")
@click.option("--analyzer-dir", default=None, help="Directory of the analyzer crate.")
@click.pass_context
def run(
    ctx: click.Context,
    style: str | None,
    toolchain: str | None,
    analyzer_dir: str | None,
) -> None:
    """Prepare the toolchain, ask for parameters and run the analyzer."""
    from chainboot.core.errors import BootstrapError
    from chainboot.core.use_cases.bootstrap import run_bootstrap

    config = load_cli_config(
        ctx, style=style, toolchain=toolchain, analyzer_dir=analyzer_dir,
    )

    if not ctx.obj.get("quiet"):
        click.secho(f"\n🔗 chainboot {__version__}", fg="cyan", bold=True)
        click.echo(f"   Toolchain: {config.toolchain} (+{config.component})")
        click.echo(f"   Analyzer:  {config.analyzer_dir} [{config.style.value}]")
        click.echo()

    try:
        session = run_bootstrap(config, report=report)
    except BootstrapError as e:
        click.secho(f"❌ {e.message}", fg="red", bold=True)
        if e.detail:
            click.echo(e.detail.rstrip())
        sys.exit(e.exit_code)

    if session.exit_code != 0:
        sys.exit(session.exit_code)


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate chainboot.yml."""
    from chainboot.core.config.loader import ConfigError, find_config_file, load_config

    path = ctx.obj.get("config_path") or find_config_file()
    try:
        load_config(path, search=False)
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"valid": False, "path": str(path), "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"valid": True, "path": str(path) if path else None}, indent=2))
        return

    if path is None:
        click.secho("✅ No chainboot.yml found, built-in defaults are valid", fg="green")
    else:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   File: {path}")


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Print the effective configuration."""
    cfg = load_cli_config(ctx)
    data = cfg.model_dump(mode="json")

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    for key, value in data.items():
        if isinstance(value, dict):
            click.echo(f"{key}:")
            for sub_key, sub_value in value.items():
                click.echo(f"  {sub_key}: {sub_value}")
        else:
            click.echo(f"{key}: {value}")


from chainboot.ui.cli.toolchain import toolchain  # noqa: E402

cli.add_command(toolchain)


def main() -> None:
    """Console-script entrypoint."""
    cli(obj={})


if __name__ == "__main__":
    main()
