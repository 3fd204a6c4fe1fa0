"""Root command group: resolve configuration, start logging, dispatch.

The group receives a services factory in ``ctx.obj`` and replaces it with a
:class:`CLIContext` before any subcommand runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from click.exceptions import Exit
from lib_layered_config import Config

from podium_scraping import __init__conf__
from podium_scraping.domain.errors import ConfigurationError

from .context import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from podium_scraping.composition import AppServices


def _load_config(services: AppServices, profile: str | None) -> Config:
    """Load configuration, turning a rejected profile into exit code 78."""
    try:
        return services.get_config(profile=profile)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise Exit(ExitCode.CONFIG_ERROR) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Root command: load configuration, start logging, share CLI state.

    Example:
        >>> from click.testing import CliRunner
        >>> from podium_scraping.composition import build_testing
        >>> CliRunner().invoke(cli, ["--help"], obj=build_testing).exit_code
        0
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()
    config = _load_config(services, profile)
    services.init_logging(config)
    store_cli_context(ctx, CLIContext(config=config, services=services, profile=profile))
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from package ancestors, so registration waits until ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_fail, cli_hello, cli_info, cli_start

    for cmd in (cli_info, cli_hello, cli_start, cli_fail, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
