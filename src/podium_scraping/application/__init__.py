"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.use_cases` - Greeter and application start hook
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    Echo,
    GetConfig,
    InitLogging,
)
from .use_cases import STARTUP_MESSAGE, StartResult, say_hello, start_application

__all__ = [
    "DisplayConfig",
    "Echo",
    "GetConfig",
    "InitLogging",
    "STARTUP_MESSAGE",
    "StartResult",
    "say_hello",
    "start_application",
]
