"""Configuration inspection command."""

from __future__ import annotations

import sys
from typing import Any

import typer

from feedback_hub.cli.io import console, error_console


def _cli() -> Any:
    return sys.modules["feedback_hub.cli"]


def settings_show() -> None:
    """Display the active configuration."""

    try:
        config_service = _cli().ConfigService()
    except (FileNotFoundError, ValueError) as exc:
        error_console.print(f"[red]Unable to load configuration: {exc}[/]")
        raise typer.Exit(code=1) from exc

    console.print(f"[dim]{config_service.config_path}[/]")
    console.print_json(data=config_service.as_dict())


__all__ = ["settings_show"]
