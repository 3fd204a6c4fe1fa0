"""Public API stories: ``hello`` and ``start`` wired to standard output."""

from __future__ import annotations

import threading

import pytest

import podium_scraping
from podium_scraping import Atom, StartResult, StartStatus


@pytest.mark.os_agnostic
def test_hello_prints_world_and_returns_atom(capsys: pytest.CaptureFixture[str]) -> None:
    """hello() writes one ``world`` line to stdout and returns the atom."""
    result = podium_scraping.hello()

    captured = capsys.readouterr()
    assert result is Atom.WORLD
    assert captured.out == "world\n"


@pytest.mark.os_agnostic
def test_start_prints_starting_then_world(capsys: pytest.CaptureFixture[str]) -> None:
    """start(None, None) writes exactly two lines in order."""
    podium_scraping.start(None, None)

    assert capsys.readouterr().out.splitlines() == ["starting", "world"]


@pytest.mark.os_agnostic
def test_start_returns_ok_with_caller_thread(capsys: pytest.CaptureFixture[str]) -> None:
    """start() reports ok together with the calling thread."""
    result = podium_scraping.start()

    assert isinstance(result, StartResult)
    assert result == (StartStatus.OK, threading.current_thread())
    capsys.readouterr()


@pytest.mark.os_agnostic
def test_package_exports_public_names() -> None:
    """The package surface lists its public helpers."""
    expected = {"Atom", "StartResult", "StartStatus", "build_greeting", "get_config", "hello", "print_info", "start"}

    assert expected.issubset(set(podium_scraping.__all__))
