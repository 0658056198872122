"""Ordering helpers for the feedback list."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from ..core.feedback_manager import FeedbackRecord

logger = logging.getLogger(__name__)


class SortCriterion(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    RATING = "rating"


SORT_LABELS = {
    SortCriterion.NEWEST: "Newest First",
    SortCriterion.OLDEST: "Oldest First",
    SortCriterion.RATING: "Highest Rated",
}


def parse_criterion(value: str | SortCriterion) -> SortCriterion | None:
    """Return the matching criterion, or ``None`` for unknown values."""

    if isinstance(value, SortCriterion):
        return value
    try:
        return SortCriterion(str(value).strip().lower())
    except ValueError:
        return None


def sort_records(
    records: Iterable[FeedbackRecord], criterion: str | SortCriterion
) -> list[FeedbackRecord]:
    """Return a newly ordered list without touching the input.

    Every criterion is a single-key stable sort, so records that tie keep
    their input order in both directions. Unknown criteria leave the input
    order unchanged.

    Args:
        records (Iterable[FeedbackRecord]): Records to order.
        criterion (str | SortCriterion): ``newest``, ``oldest`` or ``rating``.

    Returns:
        list[FeedbackRecord]: Freshly ordered records.
    """

    items = list(records)
    resolved = parse_criterion(criterion)
    if resolved is SortCriterion.NEWEST:
        return sorted(items, key=lambda item: item.timestamp, reverse=True)
    if resolved is SortCriterion.OLDEST:
        return sorted(items, key=lambda item: item.timestamp)
    if resolved is SortCriterion.RATING:
        # unrated entries rank below a one-star rating
        return sorted(
            items,
            key=lambda item: item.rating if item.rating is not None else 0,
            reverse=True,
        )

    logger.warning("unknown_sort_criterion", extra={"criterion": str(criterion)})
    return items
