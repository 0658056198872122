"""Header, chat input and model chip commands."""

from __future__ import annotations

import sys
from typing import Any

import typer

from feedback_hub.cli.io import console
from feedback_hub.cli.renderers import render_chat, render_header, render_models
from feedback_hub.core.chrome import CHAT_MODES, FEATURE_CHIPS, MODEL_CHIPS


def _cli() -> Any:
    return sys.modules["feedback_hub.cli"]


def header() -> None:
    """Show the navigation header."""

    render_header()


def chat_send(message: str = typer.Argument(..., help="Message to send.")) -> None:
    """Send a chat message; blank messages are ignored."""

    state = _cli().get_state()
    sent = state.chat.send(message)
    if sent is None:
        console.print("[yellow]Nothing to send.[/]")
        return
    state.save()
    render_chat(state.chat)


def chat_mode(mode: str = typer.Argument(..., help="Standard, Creative, Precise or Balanced.")) -> None:
    """Switch the chat response mode."""

    state = _cli().get_state()
    if not state.chat.select_mode(mode.strip().capitalize()):
        raise typer.BadParameter(f"Mode must be one of: {', '.join(CHAT_MODES)}.")
    state.save()
    render_chat(state.chat)


def models_show() -> None:
    """List feature and model chips with their selection."""

    render_models(_cli().get_state().models)


def models_select(model_id: str = typer.Argument(..., help="Model chip id.")) -> None:
    """Select the active model."""

    state = _cli().get_state()
    if not state.models.select_model(model_id):
        raise typer.BadParameter(
            f"Model must be one of: {', '.join(chip.id for chip in MODEL_CHIPS)}."
        )
    state.save()
    render_models(state.models)


def models_toggle(feature_id: str = typer.Argument(..., help="Feature chip id.")) -> None:
    """Toggle a feature chip on or off."""

    state = _cli().get_state()
    if feature_id not in {chip.id for chip in FEATURE_CHIPS}:
        raise typer.BadParameter(
            f"Feature must be one of: {', '.join(chip.id for chip in FEATURE_CHIPS)}."
        )
    state.models.toggle_feature(feature_id)
    state.save()
    render_models(state.models)


__all__ = [
    "chat_mode",
    "chat_send",
    "header",
    "models_select",
    "models_show",
    "models_toggle",
]
