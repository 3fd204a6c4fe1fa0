"""Composition root wiring adapters to application ports.

Also exposes :func:`hello` and :func:`start`, the use cases wired to
standard output, as the package's public entry points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.console.echo import echo_stdout
from ..adapters.logging.setup import init_logging
from ..application.ports import (
    DisplayConfig,
    Echo,
    GetConfig,
    InitLogging,
)
from ..application.use_cases import StartResult, say_hello, start_application
from ..domain.enums import Atom

# Static conformance assertions checked by the type checker only.
if TYPE_CHECKING:
    from ..adapters.memory.console import EchoSpy

    _assert_echo: Echo = echo_stdout
    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    echo: Echo
    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        echo=echo_stdout,
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing(*, spy: EchoSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional EchoSpy capturing console lines. A fresh one is
            created when None; pass your own to assert on the output.
    """
    from ..adapters.memory import (
        EchoSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    echo_spy = spy if spy is not None else EchoSpy()

    return AppServices(
        echo=echo_spy.echo,
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


def hello() -> Atom:
    """Print ``world`` to standard output and return :attr:`Atom.WORLD`."""
    return say_hello(echo=echo_stdout)


def start(start_type: object = None, start_args: object = None) -> StartResult:
    """Print ``starting`` and ``world``, then report a successful start.

    Both arguments are accepted for host compatibility and ignored.
    """
    return start_application(start_type, start_args, echo=echo_stdout)


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    # Logging
    "init_logging",
    # Console
    "echo_stdout",
    # Wired use cases
    "hello",
    "start",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
