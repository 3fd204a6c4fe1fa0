"""Shared helpers for CLI command modules."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import lib_log_rich.runtime


@contextmanager
def job_context(command: str, **extra: Any) -> Iterator[None]:
    """Bind ``job_id``/``command`` log context while the command runs.

    Binding needs an active runtime; with in-memory services nothing is bound.

    Args:
        command: CLI command name, used for ``job_id`` as ``cli-<command>``.
        **extra: Additional structured fields for the log context.
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command, **extra}):
        yield


__all__ = ["job_context"]
