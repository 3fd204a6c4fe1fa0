"""CLI core stories: traceback, main entry, help, fail, info, unknown command."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from podium_scraping import __init__conf__
from podium_scraping.adapters import cli as cli_mod
from podium_scraping.composition import build_production, build_testing


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    """snapshot_traceback_state returns both flags disabled initially."""
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_restore_traceback_state_resets_flags_to_previous(managed_traceback_state: None) -> None:
    """restore_traceback_state resets flags to their pre-apply values."""
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(previous)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback enables both flags while the command runs and restores them after."""
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append((lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color))

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_testing)

    assert exit_code == 0
    assert notes == [(True, True)]
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_main_requires_services_factory() -> None:
    """main() refuses to run without a composition root."""
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_info_command_prints_package_name(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """info prints the metadata banner."""
    exit_code = cli_mod.main(["info"], services_factory=build_production)

    assert exit_code == 0
    assert __init__conf__.name in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_when_cli_runs_without_arguments_help_is_printed(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """No subcommand shows help and succeeds."""
    result = cli_runner.invoke(cli_mod.cli, [], obj=testing_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_version_option_prints_shell_command_and_version(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """--version prints '<shell_command> version <version>'."""
    result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=testing_factory)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_fail_command_returns_nonzero_with_summary(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """fail exits non-zero and names the error on stderr."""
    exit_code = cli_mod.main(["fail"], services_factory=build_testing)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "RuntimeError" in plain_err or "I should fail" in plain_err


@pytest.mark.os_agnostic
def test_traceback_flag_displays_full_exception_traceback(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback prints the complete traceback on failure."""
    exit_code = cli_mod.main(["--traceback", "fail"], services_factory=build_testing)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: I should fail" in plain_err


@pytest.mark.os_agnostic
def test_unknown_command_is_a_usage_error(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """An unknown subcommand exits with click's usage error code."""
    exit_code = cli_mod.main(["does-not-exist"], services_factory=build_testing)

    assert exit_code == 2
    assert "No such command" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_cli_exports_all_registered_commands() -> None:
    """The CLI facade exports every registered command."""
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}

    assert {"cli_config", "cli_fail", "cli_hello", "cli_info", "cli_start"} <= exported
    assert set(cli_mod.cli.commands) == {"config", "fail", "hello", "info", "start"}
