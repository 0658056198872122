"""Derived statistics over a feedback snapshot.

Updates:
    v0.1.0 - 2026-10-12 - Added count, average rating and positive count.
    v0.2.0 - 2026-10-15 - Added sentiment and category breakdowns.
    v0.2.1 - 2026-10-19 - Unrated records count as zero stars in the average.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from ..core.feedback_manager import FeedbackRecord, Sentiment


@dataclass(slots=True, frozen=True)
class FeedbackStats:
    """Summary figures shown above the feedback list."""

    count: int
    average_rating: float
    positive_count: int
    sentiment_breakdown: Dict[str, int] = field(default_factory=dict)
    category_breakdown: Dict[str, int] = field(default_factory=dict)

    @property
    def average_display(self) -> str:
        """Average rating rounded to one decimal place."""

        return f"{self.average_rating:.1f}"

    def as_dict(self) -> dict:
        return {
            "count": self.count,
            "average_rating": self.average_rating,
            "average_display": self.average_display,
            "positive_count": self.positive_count,
            "sentiment_breakdown": dict(self.sentiment_breakdown),
            "category_breakdown": dict(self.category_breakdown),
        }


def compute_stats(records: Iterable[FeedbackRecord]) -> FeedbackStats | None:
    """Compute statistics for the supplied records.

    Args:
        records (Iterable[FeedbackRecord]): Snapshot of the feedback store.

    Returns:
        FeedbackStats | None: ``None`` when there is nothing to summarize, so
        callers show a "no data" state instead of dividing by zero.
    """

    items = list(records)
    if not items:
        return None

    # unrated records count as zero stars
    average = sum(item.rating or 0 for item in items) / len(items)

    sentiments = {sentiment.value: 0 for sentiment in Sentiment}
    categories: Dict[str, int] = {}
    for item in items:
        sentiments[item.sentiment.value] += 1
        categories[item.category] = categories.get(item.category, 0) + 1

    return FeedbackStats(
        count=len(items),
        average_rating=average,
        positive_count=sentiments[Sentiment.POSITIVE.value],
        sentiment_breakdown=sentiments,
        category_breakdown=categories,
    )
