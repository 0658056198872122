"""Sidebar session commands."""

from __future__ import annotations

import sys
from typing import Any, Optional

import typer
from rich.panel import Panel

from feedback_hub.cli.io import console
from feedback_hub.cli.renderers import render_session, render_session_groups


def _cli() -> Any:
    return sys.modules["feedback_hub.cli"]


def sessions_new(
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Session title."),
    date: Optional[str] = typer.Option(
        None, "--date", "-d", help="Date label used for grouping (e.g. Today)."
    ),
) -> None:
    """Start a new session and make it active."""

    cli_module = _cli()
    state = cli_module.get_state()
    result = cli_module.get_orchestrator().execute(
        "session_actions", {"action": "new", "title": title, "date": date}
    )
    state.save()
    render_session(result["session"], title="New Session")


def sessions_select(
    session_id: str = typer.Argument(..., help="Identifier of the session to activate."),
) -> None:
    """Mark a session as active."""

    cli_module = _cli()
    state = cli_module.get_state()
    result = cli_module.get_orchestrator().execute(
        "session_actions", {"action": "select", "session_id": session_id}
    )
    state.save()
    active = result["active"]
    if active is None:
        console.print(f"[yellow]No session with id {session_id}; nothing is highlighted.[/]")
        return
    render_session(active, title="Active Session")


def sessions_list(
    search: Optional[str] = typer.Option(
        None, "--search", "-q", help="Only show sessions whose title contains this text."
    ),
) -> None:
    """Show sessions grouped by date label."""

    cli_module = _cli()
    state = cli_module.get_state()
    result = cli_module.get_orchestrator().execute(
        "session_actions", {"action": "list", "query": search or ""}
    )
    render_session_groups(result["groups"], sidebar_open=state.sidebar.is_open)


def sessions_delete_all() -> None:
    """Delete every session and clear the active selection."""

    cli_module = _cli()
    state = cli_module.get_state()
    result = cli_module.get_orchestrator().execute("session_actions", {"action": "delete_all"})
    state.save()
    console.print(Panel(f"Deleted {result['removed']} sessions.", title="Delete All Sessions"))


def sidebar_toggle() -> None:
    """Open or collapse the session sidebar."""

    state = _cli().get_state()
    is_open = state.sidebar.toggle()
    state.save()
    console.print(f"Sidebar {'opened' if is_open else 'collapsed'}.")


__all__ = [
    "sessions_delete_all",
    "sessions_list",
    "sessions_new",
    "sessions_select",
    "sidebar_toggle",
]
