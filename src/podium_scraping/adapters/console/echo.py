"""Console echo adapter writing plain lines to standard output."""

from __future__ import annotations

import rich_click as click


def echo_stdout(message: str) -> None:
    """Write ``message`` and a line terminator to standard output.

    Stream failures (closed stdout, broken pipe) propagate to the caller.

    Example:
        >>> echo_stdout("world")
        world
    """
    click.echo(message)


__all__ = ["echo_stdout"]
