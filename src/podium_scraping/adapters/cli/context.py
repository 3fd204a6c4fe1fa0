"""Per-invocation CLI state and the ``--traceback`` switch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from podium_scraping.composition import AppServices

CLICK_CONTEXT_SETTINGS: dict[str, list[str]] = {"help_option_names": ["-h", "--help"]}


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools.config`` flags driven by ``--traceback``."""

    enabled: bool
    force_color: bool


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group hands to every subcommand through ``ctx.obj``."""

    config: Config
    services: AppServices
    profile: str | None = None


def store_cli_context(ctx: click.Context, state: CLIContext) -> None:
    """Replace the services factory in ``ctx.obj`` with the resolved state."""
    ctx.obj = state


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root group.

    Raises:
        RuntimeError: When a subcommand runs without the root group.
    """
    state = ctx.find_object(CLIContext)
    if state is None:
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return state


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for the boundary handler.

    Example:
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
        >>> apply_traceback_preferences(False)
    """
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    cfg = lib_cli_exit_tools.config
    return TracebackState(bool(cfg.traceback), bool(cfg.traceback_force_color))


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
