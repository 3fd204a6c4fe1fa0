"""Behaviour-layer stories: pure domain function tests."""

from __future__ import annotations

import pytest

from podium_scraping.domain import behaviors
from podium_scraping.domain.enums import Atom


@pytest.mark.os_agnostic
def test_build_greeting_returns_world_atom() -> None:
    """build_greeting yields the WORLD atom itself, not a lookalike."""
    assert behaviors.build_greeting() is Atom.WORLD


@pytest.mark.os_agnostic
def test_build_greeting_is_stable_across_calls() -> None:
    """Repeated calls return the identical constant."""
    results = {id(behaviors.build_greeting()) for _ in range(5)}

    assert results == {id(Atom.WORLD)}


@pytest.mark.os_agnostic
def test_render_atom_produces_lowercase_word() -> None:
    """The WORLD atom renders as the bare word."""
    assert behaviors.render_atom(Atom.WORLD) == "world"
