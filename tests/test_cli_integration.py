from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

import feedback_hub.cli as cli
from tests.helpers.cli import make_cli_runtime, patch_runtime


@pytest.fixture()
def cli_session(monkeypatch: pytest.MonkeyPatch) -> tuple[CliRunner, cli.AppState, Any]:
    runner = CliRunner()
    orchestrator, state = make_cli_runtime(seed_samples=True)
    patch_runtime(monkeypatch, orchestrator, state)
    return runner, state, orchestrator


def test_end_to_end_feedback_flow(cli_session: tuple[CliRunner, cli.AppState, Any]) -> None:
    runner, state, _ = cli_session

    result = runner.invoke(cli.app, ["stats"])
    assert result.exit_code == 0
    assert "4.0" in result.output

    result = runner.invoke(
        cli.app,
        ["submit", "Checkout is slow", "--category", "Product Quality", "--rating", "2"],
    )
    assert result.exit_code == 0
    assert len(state.feedback_service.manager) == 3

    result = runner.invoke(cli.app, ["list", "--sort", "oldest"])
    assert result.exit_code == 0
    assert "Checkout is slow" in result.output
    assert state.sort_by == "oldest"

    result = runner.invoke(cli.app, ["clear"])
    assert result.exit_code == 0

    result = runner.invoke(cli.app, ["list"])
    assert result.exit_code == 0
    assert "No feedback yet" in result.output


def test_submit_without_category_fails(cli_session: tuple[CliRunner, cli.AppState, Any]) -> None:
    runner, state, _ = cli_session

    result = runner.invoke(cli.app, ["submit", "Missing category"])

    assert result.exit_code == 1
    assert len(state.feedback_service.manager) == 2


def test_sessions_group_is_default_subcommand(
    cli_session: tuple[CliRunner, cli.AppState, Any]
) -> None:
    runner, state, _ = cli_session

    result = runner.invoke(cli.app, ["sessions", "new", "--title", "Retro", "--date", "Yesterday"])
    assert result.exit_code == 0

    result = runner.invoke(cli.app, ["sessions"])
    assert result.exit_code == 0
    assert "Yesterday" in result.output
    assert "Retro" in result.output

    result = runner.invoke(cli.app, ["sidebar", "toggle"])
    assert result.exit_code == 0
    assert state.sidebar.is_open is False


def test_settings_command_reads_config_dir(
    cli_session: tuple[CliRunner, cli.AppState, Any],
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    runner, _, _ = cli_session
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "settings.yaml").write_text("app: {name: Probe}\n", encoding="utf-8")
    monkeypatch.setenv("FEEDBACK_HUB_CONFIG_PATH", str(config_dir))

    result = runner.invoke(cli.app, ["settings"])

    assert result.exit_code == 0
    assert "Probe" in result.output


def test_settings_command_reports_missing_config(
    cli_session: tuple[CliRunner, cli.AppState, Any],
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    runner, _, _ = cli_session
    monkeypatch.setenv("FEEDBACK_HUB_CONFIG_PATH", str(tmp_path / "absent"))

    result = runner.invoke(cli.app, ["settings"])

    assert result.exit_code == 1
