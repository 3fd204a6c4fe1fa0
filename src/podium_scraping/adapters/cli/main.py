"""Process boundary for the console script and ``python -m podium_scraping``.

Click runs with ``standalone_mode=False`` so that every outcome comes back
here as an exit code: click's own exits and usage errors, and any other
exception formatted by ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from podium_scraping import __init__conf__

from .context import restore_traceback_state, snapshot_traceback_state
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from podium_scraping.composition import AppServices

# Characters of traceback text printed without and with ``--traceback``.
TRACEBACK_SUMMARY_LIMIT = 500
TRACEBACK_VERBOSE_LIMIT = 10_000


def _report_unhandled(exc: BaseException) -> int:
    verbose = snapshot_traceback_state().enabled
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI once and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv`` when None.
        restore_traceback: Put the traceback flags back as they were.
        services_factory: Composition root, normally ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from podium_scraping.composition import build_production
        >>> main(["start"], services_factory=build_production)  # doctest: +SKIP
        starting
        world
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    from .root import cli

    args = list(sys.argv[1:] if argv is None else argv)
    before = snapshot_traceback_state()
    try:
        # Without standalone mode click returns the code of a ``click.exceptions.Exit``.
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return outcome if isinstance(outcome, int) else ExitCode.SUCCESS
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_unhandled(exc)
    finally:
        if restore_traceback:
            restore_traceback_state(before)
        # A worker-thread caller must not stop logging for the whole process.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
