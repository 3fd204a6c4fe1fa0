"""In-memory adapter implementations for testing.

Lightweight implementations of every application port that never touch
stdout, the filesystem, or the logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.console` - Echo recorder (EchoSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
)
from .console import EchoSpy
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from podium_scraping.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "EchoSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
