"""Console adapter - line output to standard output.

Contents:
    * :func:`.echo.echo_stdout` - Echo port backed by ``click.echo``
"""

from __future__ import annotations

from .echo import echo_stdout

__all__ = ["echo_stdout"]
