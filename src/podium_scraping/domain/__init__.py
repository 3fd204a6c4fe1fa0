"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Core domain behaviors (greeting atom)
    * :mod:`.enums` - Domain enumerations (Atom, StartStatus, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    render_atom,
)
from .enums import Atom, OutputFormat, StartStatus
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    "render_atom",
    # Enums
    "Atom",
    "OutputFormat",
    "StartStatus",
    # Errors
    "ConfigurationError",
]
