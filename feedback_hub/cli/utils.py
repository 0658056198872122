"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from feedback_hub.core.feedback_manager import CATEGORIES, RejectionReason, Sentiment

logger = logging.getLogger(__name__)

REJECTION_MESSAGES = {
    RejectionReason.EMPTY_MESSAGE: "Feedback message must not be empty.",
    RejectionReason.MISSING_CATEGORY: "Select a category with --category.",
    RejectionReason.UNKNOWN_CATEGORY: "Category is not one of the supported categories.",
    RejectionReason.INVALID_RATING: "Rating must be between 1 and 5.",
    RejectionReason.SUBMITTING: "A submission is already in progress.",
    RejectionReason.SUBMIT_FAILED: "Submission failed; your feedback was not saved.",
}


def _cli():
    return sys.modules["feedback_hub.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation."""

    if not log_level or not isinstance(log_level, str):
        return
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def resolve_category(value: Optional[str]) -> Optional[str]:
    """Match a category case-insensitively; ``None`` stays unset.

    Raises:
        typer.BadParameter: If the value names no known category.
    """

    if value is None or not value.strip():
        return None
    needle = value.strip().lower()
    for category in CATEGORIES:
        if category.lower() == needle:
            return category
    raise typer.BadParameter(
        f"Unknown category '{value}'. Choose one of: {', '.join(CATEGORIES)}."
    )


def resolve_sentiment(value: Optional[str]) -> Optional[Sentiment]:
    if value is None:
        return None
    try:
        return Sentiment(value.strip().lower())
    except ValueError as exc:
        raise typer.BadParameter(
            "Sentiment must be positive, neutral or negative."
        ) from exc


def describe_rejection(reason: Optional[RejectionReason]) -> str:
    if reason is None:
        return "Feedback was not accepted."
    return REJECTION_MESSAGES.get(reason, reason.value)


__all__ = [
    "apply_log_override",
    "describe_rejection",
    "resolve_category",
    "resolve_sentiment",
]
