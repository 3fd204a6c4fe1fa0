"""Metadata and failure-path CLI commands."""

from __future__ import annotations

import logging

import rich_click as click

from podium_scraping import __init__conf__

from ..context import CLICK_CONTEXT_SETTINGS
from ._shared import job_context

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with job_context("info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Trigger an intentional failure to exercise error handling."""
    with job_context("fail"):
        logger.warning("Executing intentional failure command")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_info"]
