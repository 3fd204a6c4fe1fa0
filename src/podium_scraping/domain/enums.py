"""Type-safe domain enums for greeting atoms, start status, and output formats."""

from __future__ import annotations

from enum import Enum


class Atom(str, Enum):
    """Symbolic constants returned by the greeter.

    Enum members are singletons, so an atom compares by identity as well as
    by value. Inherits from str so the rendering is the member value.

    Attributes:
        WORLD: The atom produced by every greeting.

    Example:
        >>> Atom.WORLD.value
        'world'
        >>> Atom("world") is Atom.WORLD
        True
    """

    WORLD = "world"


class StartStatus(str, Enum):
    """Status tag of an application start result.

    Attributes:
        OK: Startup succeeded.

    Example:
        >>> StartStatus.OK == "ok"
        True
    """

    OK = "ok"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Atom",
    "OutputFormat",
    "StartStatus",
]
