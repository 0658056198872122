"""Feedback commands for the Feedback Hub CLI."""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import typer
from rich.panel import Panel

from feedback_hub.cli.io import console, error_console
from feedback_hub.cli.renderers import (
    render_categories,
    render_feedback_overview,
    render_feedback_stats,
    render_submission,
)
from feedback_hub.cli.utils import (
    apply_log_override,
    describe_rejection,
    resolve_category,
    resolve_sentiment,
)
from feedback_hub.core.feedback_form import FeedbackForm
from feedback_hub.core.feedback_manager import SubmissionResult
from feedback_hub.services.feedback_sorter import parse_criterion

logger = logging.getLogger(__name__)


def _cli() -> Any:
    return sys.modules["feedback_hub.cli"]


def submit(
    message: str = typer.Argument(..., help="Your feedback."),
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Feedback category (see `categories`)."
    ),
    rating: Optional[int] = typer.Option(None, "--rating", "-r", help="Rating 1-5."),
    sentiment: Optional[str] = typer.Option(
        None,
        "--sentiment",
        "-s",
        help="Override the sentiment derived from the rating (positive, neutral, negative).",
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Optional display name."),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation (e.g., DEBUG, INFO).",
    ),
) -> None:
    """Submit a rated, categorized feedback entry."""

    apply_log_override(log_level)
    if rating is not None and (rating < 1 or rating > 5):
        raise typer.BadParameter("Rating must be between 1 and 5.")

    cli_module = _cli()
    state = cli_module.get_state()
    orchestrator = cli_module.get_orchestrator()

    form = FeedbackForm()
    if state.feedback_settings is not None:
        form.submit_delay = state.feedback_settings.submit_delay_seconds
    form.set_rating(rating)
    override = resolve_sentiment(sentiment)
    if override is not None:
        form.set_sentiment(override)
    form.set_message(message)
    form.set_category(resolve_category(category))
    form.user_name = name

    def _dispatch(draft: Any) -> SubmissionResult:
        outcome = orchestrator.execute("feedback_loop", {"action": "submit", "draft": draft})
        return outcome["result"]

    with console.status("Submitting..."):
        result = form.submit(_dispatch)

    if not result.accepted or result.record is None:
        error_console.print(f"[red]{describe_rejection(result.reason)}[/]")
        raise typer.Exit(code=1)

    state.save()
    logger.info("Feedback recorded (rating=%s)", rating)
    render_submission(result.record)


def list_feedback(
    sort: Optional[str] = typer.Option(
        None,
        "--sort",
        help="Ordering: newest, oldest or rating. Remembered for later calls.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Show statistics and every feedback entry."""

    apply_log_override(log_level)
    if sort is not None and parse_criterion(sort) is None:
        raise typer.BadParameter("Sort must be newest, oldest or rating.")

    cli_module = _cli()
    state = cli_module.get_state()
    if sort is not None:
        state.sort_by = parse_criterion(sort).value
        state.save()

    result = cli_module.get_orchestrator().execute(
        "feedback_loop", {"action": "overview", "sort_by": state.sort_by}
    )
    render_feedback_overview(result["overview"])


def stats(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Show total responses, average rating and positive count."""

    apply_log_override(log_level)
    result = _cli().get_orchestrator().execute("feedback_loop", {"action": "overview"})
    render_feedback_stats(result["overview"])


def clear(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Erase every feedback entry immediately."""

    apply_log_override(log_level)
    cli_module = _cli()
    state = cli_module.get_state()

    result = cli_module.get_orchestrator().execute("feedback_loop", {"action": "clear"})
    state.save()
    console.print(Panel(f"Removed {result['removed']} feedback entries.", title="Clear All"))


def categories() -> None:
    """List the supported feedback categories."""

    render_categories()


__all__ = ["categories", "clear", "list_feedback", "stats", "submit"]
