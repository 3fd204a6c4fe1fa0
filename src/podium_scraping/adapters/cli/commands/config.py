"""``config`` command: show the configuration the root group resolved."""

from __future__ import annotations

import logging

import rich_click as click
from click.exceptions import Exit

from podium_scraping.domain.enums import OutputFormat

from ..context import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import job_context

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only a specific configuration section (e.g., 'lib_log_rich')",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Display the merged configuration from all sources.

    Precedence: defaults -> app -> host -> user -> dotenv -> env.
    Use the root ``--profile`` option to pick a profile.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with job_context("config", format=fmt.value, profile=cli_ctx.profile):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(
                cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile
            )
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise Exit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
