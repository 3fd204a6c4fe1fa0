"""Use cases: the greeter and the application start hook.

Both use cases are synchronous and stateless. Console output goes through
the :class:`~podium_scraping.application.ports.Echo` port so callers decide
where the lines land.

Contents:
    * :class:`StartResult` - ``(status, context)`` pair returned on startup.
    * :func:`say_hello` - Echo the greeting atom and return it.
    * :func:`start_application` - Announce startup, greet, report success.
"""

from __future__ import annotations

import logging
import threading
from typing import NamedTuple

from ..domain.behaviors import build_greeting, render_atom
from ..domain.enums import Atom, StartStatus
from .ports import Echo

logger = logging.getLogger(__name__)

#: Line written before the greeting when the application boots.
STARTUP_MESSAGE = "starting"


class StartResult(NamedTuple):
    """Success indicator returned by :func:`start_application`.

    Unpacks like a pair: ``status, context = start_application(...)``.

    Attributes:
        status: Status tag of the startup.
        context: Thread that invoked the start hook.

    Example:
        >>> result = StartResult(StartStatus.OK, threading.current_thread())
        >>> result.ok
        True
    """

    status: StartStatus
    context: threading.Thread

    @property
    def ok(self) -> bool:
        """Return True when startup succeeded."""
        return self.status is StartStatus.OK


def say_hello(*, echo: Echo) -> Atom:
    """Echo the greeting atom as a single line and return it.

    Args:
        echo: Console port receiving exactly one line.

    Returns:
        Always :attr:`Atom.WORLD`.

    Example:
        >>> lines: list[str] = []
        >>> say_hello(echo=lines.append)
        <Atom.WORLD: 'world'>
        >>> lines
        ['world']
    """
    atom = build_greeting()
    echo(render_atom(atom))
    return atom


def start_application(start_type: object, start_args: object, *, echo: Echo) -> StartResult:
    """Simulate the application boot sequence.

    Writes ``starting``, runs the greeter for its output only, and reports
    success together with the calling thread.

    Args:
        start_type: Placeholder for the startup type. Ignored.
        start_args: Placeholder for startup arguments. Ignored.
        echo: Console port receiving ``starting`` then ``world``.

    Returns:
        ``StartResult(StartStatus.OK, threading.current_thread())``.

    Example:
        >>> lines: list[str] = []
        >>> status, context = start_application(None, None, echo=lines.append)
        >>> status, lines
        (<StartStatus.OK: 'ok'>, ['starting', 'world'])
        >>> context is threading.current_thread()
        True
    """
    del start_type, start_args
    logger.debug("Application boot requested")
    echo(STARTUP_MESSAGE)
    say_hello(echo=echo)
    return StartResult(status=StartStatus.OK, context=threading.current_thread())


__all__ = [
    "STARTUP_MESSAGE",
    "StartResult",
    "say_hello",
    "start_application",
]
