"""Feedback Hub CLI package."""

from __future__ import annotations

import logging

import typer

from feedback_hub.cli.commands.chrome import (
    chat_mode,
    chat_send,
    header,
    models_select,
    models_show,
    models_toggle,
)
from feedback_hub.cli.commands.feedback import (
    categories,
    clear,
    list_feedback,
    stats,
    submit,
)
from feedback_hub.cli.commands.sessions import (
    sessions_delete_all,
    sessions_list,
    sessions_new,
    sessions_select,
    sidebar_toggle,
)
from feedback_hub.cli.commands.settings import settings_show
from feedback_hub.cli.io import console, error_console
from feedback_hub.cli.runtime import (
    build_runtime,
    get_orchestrator,
    get_runtime,
    get_state,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)
from feedback_hub.cli.state import PROJECT_ROOT, STATE_PATH, AppState
from feedback_hub.core.logging_setup import configure_logging
from feedback_hub.core.orchestrator import Orchestrator
from feedback_hub.services.config_service import ConfigService, FeedbackSettings

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Feedback Hub CLI")
sessions_app = typer.Typer(
    add_completion=False, help="Manage feedback sessions in the sidebar."
)
sidebar_app = typer.Typer(add_completion=False, help="Control the session sidebar.")
chat_app = typer.Typer(add_completion=False, help="Chat input controls.")
models_app = typer.Typer(add_completion=False, help="Feature and model chips.")


@sessions_app.callback(invoke_without_command=True)
def _sessions_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        sessions_list(search=None)


app.command()(submit)
app.command("list")(list_feedback)
app.command()(stats)
app.command()(clear)
app.command()(categories)
app.command()(header)
app.command("settings")(settings_show)

sessions_app.command("new")(sessions_new)
sessions_app.command("select")(sessions_select)
sessions_app.command("list")(sessions_list)
sessions_app.command("delete-all")(sessions_delete_all)

sidebar_app.command("toggle")(sidebar_toggle)

chat_app.command("send")(chat_send)
chat_app.command("mode")(chat_mode)

models_app.command("show")(models_show)
models_app.command("select")(models_select)
models_app.command("toggle")(models_toggle)

app.add_typer(sessions_app, name="sessions")
app.add_typer(sidebar_app, name="sidebar")
app.add_typer(chat_app, name="chat")
app.add_typer(models_app, name="models")


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    # Typer apps / entrypoints
    "app",
    "chat_app",
    "models_app",
    "sessions_app",
    "sidebar_app",
    "main",
    # Console & logging
    "console",
    "error_console",
    "logger",
    "configure_logging",
    "set_runtime_level",
    # State & runtime
    "AppState",
    "ConfigService",
    "FeedbackSettings",
    "Orchestrator",
    "PROJECT_ROOT",
    "STATE_PATH",
    "build_runtime",
    "get_orchestrator",
    "get_runtime",
    "get_state",
    "initialize_runtime",
    "set_runtime",
    # Commands
    "categories",
    "chat_mode",
    "chat_send",
    "clear",
    "header",
    "list_feedback",
    "models_select",
    "models_show",
    "models_toggle",
    "sessions_delete_all",
    "sessions_list",
    "sessions_new",
    "sessions_select",
    "settings_show",
    "sidebar_toggle",
    "stats",
    "submit",
]
