"""Shared pytest fixtures for domain, use-case, CLI and module-entry tests.

Fixtures use descriptive names that read as plain English and are
discovered implicitly through pytest's conftest mechanism.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from podium_scraping.adapters.memory import EchoSpy
    from podium_scraping.composition import AppServices


def _load_dotenv() -> None:
    """Load a project-level .env file when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory."""
    from podium_scraping.composition import build_production

    return build_production


@pytest.fixture
def echo_spy() -> EchoSpy:
    """Provide an empty EchoSpy."""
    from podium_scraping.adapters.memory import EchoSpy

    return EchoSpy()


@pytest.fixture
def testing_factory(echo_spy: EchoSpy) -> Callable[[], AppServices]:
    """Provide an in-memory services factory whose console output lands in ``echo_spy``."""
    from podium_scraping.composition import build_testing

    services = build_testing(spy=echo_spy)
    return lambda: services


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test."""
    from podium_scraping.adapters.config.loader import clear_config_cache as _clear

    _clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
    echo_spy: EchoSpy,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory building in-memory services around a given Config.

    The production display adapter is kept so ``config`` output is real.
    """
    from podium_scraping.composition import AppServices, build_production, build_testing

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        memory = build_testing(spy=echo_spy)
        services = AppServices(
            echo=memory.echo,
            get_config=_fake_get_config,
            display_config=build_production().display_config,
            init_logging=memory.init_logging,
        )
        return lambda: services

    return _inject
