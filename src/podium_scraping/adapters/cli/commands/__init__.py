"""CLI command implementations.

Contents:
    * Greeter and start commands from :mod:`.lifecycle`
    * Info and failure commands from :mod:`.info`
    * Config display from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_fail, cli_info
from .lifecycle import cli_hello, cli_start

__all__ = [
    "cli_config",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_start",
]
