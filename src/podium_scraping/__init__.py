"""Public package surface exposing the greeter, the start hook, and metadata.

Routes imports through the architectural layers:
- Domain exports: greeting atom and start status
- Application exports: the start result type
- Composition exports: use cases wired to stdout, configuration
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.use_cases import StartResult

# Composition exports (wired adapters)
from .composition import get_config, hello, start

# Domain exports
from .domain.behaviors import CANONICAL_GREETING, build_greeting
from .domain.enums import Atom, StartStatus

__all__ = [
    "Atom",
    "CANONICAL_GREETING",
    "StartResult",
    "StartStatus",
    "build_greeting",
    "get_config",
    "hello",
    "print_info",
    "start",
]
