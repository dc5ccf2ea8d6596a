"""
CLI commands for managing the pinned toolchain outside a full run.

Thin wrappers over ``chainboot.core.services.toolchain``.
"""

from __future__ import annotations

import json
import sys

import click

from chainboot.ui.cli.helpers import load_cli_config


@click.group()
def toolchain() -> None:
    """Toolchain — status, install, uninstall."""


@toolchain.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show whether rustup, the toolchain and its component are present."""
    from chainboot.core.services.toolchain import get_toolchain_status

    config = load_cli_config(ctx)
    result = get_toolchain_status(config)

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    if not result["manager_available"]:
        click.secho(f"❌ {result['version_manager']} not found", fg="red")
        sys.exit(2)

    version = f" {result['manager_version']}" if result["manager_version"] else ""
    click.secho(f"🔧 {result['version_manager']}{version}", fg="cyan", bold=True)
    tc_icon = "✅" if result["toolchain_present"] else "❌"
    comp_icon = "✅" if result["component_present"] else "❌"
    click.echo(f"   {tc_icon} toolchain {result['toolchain']}")
    click.echo(f"   {comp_icon} component {result['component']}")


@toolchain.command()
@click.pass_context
def install(ctx: click.Context) -> None:
    """Install the toolchain and its component without prompting."""
    from chainboot.core.models.session import PresenceResult
    from chainboot.core.services.toolchain import (
        ensure_component,
        install_toolchain,
        manager_available,
        probe_toolchain,
    )

    config = load_cli_config(ctx)
    if not manager_available(config):
        click.secho(f"❌ {config.version_manager} not found", fg="red")
        sys.exit(2)

    if probe_toolchain(config) is PresenceResult.PRESENT:
        click.secho(f"✅ {config.toolchain} already installed", fg="green")
    else:
        result = install_toolchain(config)
        if not result["ok"]:
            click.secho(f"❌ {result['error']}", fg="red")
            sys.exit(3)
        click.secho(f"✅ {result['message']}", fg="green")

    result = ensure_component(config)
    if not result["ok"]:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(4)
    click.secho(f"✅ {result['message']}", fg="green")


@toolchain.command()
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
def uninstall(ctx: click.Context, assume_yes: bool) -> None:
    """Remove the pinned toolchain."""
    from chainboot.core.models.session import PresenceResult
    from chainboot.core.services.prompts import confirm
    from chainboot.core.services.toolchain import probe_toolchain, uninstall_toolchain

    config = load_cli_config(ctx)
    if probe_toolchain(config) is PresenceResult.ABSENT:
        click.secho(f"ℹ️  {config.toolchain} is not installed", fg="cyan")
        return

    if not assume_yes and not confirm(f"Uninstall {config.toolchain}?", False):
        click.echo("Nothing removed.")
        return

    result = uninstall_toolchain(config)
    if not result["ok"]:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)
    click.secho(f"✅ {result['message']}", fg="green")
