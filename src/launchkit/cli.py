"""Root CLI group for launchkit with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from launchkit import __version__
from launchkit.commands import register_commands
from launchkit.commands._context import AppContext
from launchkit.config.settings import LaunchkitSettings
from launchkit.exceptions import LaunchkitError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="launchkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """launchkit: bootstrap lifecycle plugins."""
    try:
        settings = LaunchkitSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    except (LaunchkitError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
