"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from .enums import Atom

CANONICAL_GREETING = Atom.WORLD


def build_greeting() -> Atom:
    """Return the atom every greeting produces.

    Returns:
        Always :attr:`Atom.WORLD`.

    Example:
        >>> build_greeting() is Atom.WORLD
        True
    """
    return CANONICAL_GREETING


def render_atom(atom: Atom) -> str:
    """Render an atom the way it appears on the console.

    Example:
        >>> render_atom(Atom.WORLD)
        'world'
    """
    return atom.value


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
    "render_atom",
]
