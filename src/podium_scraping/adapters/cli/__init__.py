"""CLI package providing the command-line interface.

Re-exports the public symbols of its submodules so consumers stay insulated
from internal module boundaries.
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_fail,
    cli_hello,
    cli_info,
    cli_start,
)
from .context import (
    CLICK_CONTEXT_SETTINGS,
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    # Click settings
    "CLICK_CONTEXT_SETTINGS",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_config",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_start",
]
