"""In-memory console adapter recording echoed lines."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class EchoSpy:
    """Record every line passed to :meth:`echo` instead of printing it.

    Example:
        >>> spy = EchoSpy()
        >>> spy.echo("starting")
        >>> spy.lines
        ['starting']
    """

    lines: list[str] = field(default_factory=list)

    def echo(self, message: str) -> None:
        """Satisfy the Echo port by appending ``message``."""
        self.lines.append(message)

    def clear(self) -> None:
        """Forget all recorded lines."""
        self.lines.clear()


__all__ = ["EchoSpy"]
