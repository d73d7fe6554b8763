"""Hookit CLI - inspect and run hooks declared in a config file."""

import asyncio
import logging
import sys
from typing import Any

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler

from .config import HookitConfig
from .errors import HookError
from .loader import build_manager
from .manager import HookManager
from .ui import console, render_error, render_hook_table, render_outcome
from .ui.theme import PALETTE


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _parse_value(raw: str) -> Any:
    """Parse a command-line value as YAML so lists and numbers survive."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _load_manager(config: HookitConfig) -> HookManager:
    try:
        return build_manager(config)
    except HookError as e:
        render_error(str(e))
        sys.exit(1)


# CLI Commands
@click.group()
@click.option("--config", "-c", "config_path", help="Config file (default: $HOOKIT_CONFIG or ./hookit.yaml)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """HOOKIT - named hook execution engine.

    Declare hook points and plugins in YAML, list them, run them.
    """
    _setup_logging(verbose)
    ctx.obj = HookitConfig(config_path)


@cli.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_obj
def init(config, force):
    """Write a starter config file."""
    if config.exists and not force:
        raise click.ClickException(f"{config.config_path} already exists (use --force to overwrite)")
    config.create_default()
    console.print(f"Wrote {config.config_path}", style=PALETTE.success)


@cli.command(name="config")
@click.pass_obj
def show_config(config):
    """Show configuration."""
    hooks = config.get_hooks_config()
    plugins = config.get_plugins_config()

    console.print(f"Config file: {config.config_path}")
    if not config.exists:
        console.print("Config file not found.", style="dim")
    console.print(f"Hook points: {[h.get('name') for h in hooks if isinstance(h, dict)]}")
    console.print(f"Plugins: {[p.get('module') for p in plugins if isinstance(p, dict)]}")


@cli.command(name="list")
@click.pass_obj
def list_hooks(config):
    """List hook points and the handlers attached to them."""
    manager = _load_manager(config)
    render_hook_table(manager.describe())


@cli.command()
@click.argument("name")
@click.argument("payload", nargs=-1)
@click.option("--resolver-arg", "-r", multiple=True, help="Extra resolver argument (repeatable)")
@click.pass_obj
def run(config, name, payload, resolver_arg):
    """Execute hook NAME with the given PAYLOAD arguments.

    Each argument is parsed as YAML, so '[a, b]' is a list and '3' a number.
    For sync hooks the first payload argument is the initial value.
    """
    manager = _load_manager(config)
    args = [_parse_value(p) for p in payload]
    resolver_args = [_parse_value(r) for r in resolver_arg]

    try:
        value = asyncio.run(manager.execute(name, resolver_args, *args))
    except HookError as e:
        render_error(str(e))
        sys.exit(1)

    render_outcome(name, value)
