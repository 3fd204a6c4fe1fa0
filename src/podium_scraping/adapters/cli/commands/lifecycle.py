"""Greeter and application start commands.

``start`` is the hook a process supervisor calls: it prints the boot lines
and exits 0 when the start result reports success.
"""

from __future__ import annotations

import logging

import rich_click as click
from click.exceptions import Exit

from podium_scraping.application.use_cases import say_hello, start_application

from ..context import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import job_context

logger = logging.getLogger(__name__)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_hello(ctx: click.Context) -> None:
    """Print the greeting atom."""
    cli_ctx = get_cli_context(ctx)
    with job_context("hello"):
        atom = say_hello(echo=cli_ctx.services.echo)
        logger.info("Greeting emitted", extra={"atom": atom.name})


@click.command("start", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_start(ctx: click.Context) -> None:
    """Run the application start hook and report its status as exit code."""
    cli_ctx = get_cli_context(ctx)
    with job_context("start", profile=cli_ctx.profile):
        result = start_application(None, None, echo=cli_ctx.services.echo)
        logger.info(
            "Application start finished",
            extra={"status": result.status.value, "caller_thread": result.context.name},
        )
    if not result.ok:
        raise Exit(ExitCode.GENERAL_ERROR)


__all__ = ["cli_hello", "cli_start"]
