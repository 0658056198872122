"""Feedback service orchestration.

Updates:
    v0.1.0 - 2026-10-13 - Combined store, statistics and sorting behind one service.
    v0.2.0 - 2026-10-15 - Seed sample entries and preload snapshot records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from ..core.feedback_manager import (
    FeedbackDraft,
    FeedbackManager,
    FeedbackRecord,
    Sentiment,
    SubmissionResult,
)
from .feedback_sorter import SortCriterion, parse_criterion, sort_records
from .feedback_stats import FeedbackStats, compute_stats

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class FeedbackOverview:
    """What the display panel needs for one render."""

    stats: Optional[FeedbackStats]
    records: list[FeedbackRecord] = field(default_factory=list)
    sort_by: str = SortCriterion.NEWEST.value

    @property
    def has_data(self) -> bool:
        return self.stats is not None

    def as_dict(self) -> dict:
        return {
            "sort_by": self.sort_by,
            "stats": self.stats.as_dict() if self.stats else None,
            "records": [record.as_dict() for record in self.records],
        }


def sample_records(now: Optional[datetime] = None) -> list[FeedbackRecord]:
    """Return the two entries the feedback screen starts with."""

    current = now or datetime.now(timezone.utc)
    return [
        FeedbackRecord(
            id="1",
            rating=5,
            sentiment=Sentiment.POSITIVE,
            message=(
                "This feedback system is amazing! Very intuitive and easy to use. "
                "The design is clean and the submission process is smooth."
            ),
            category="Website Experience",
            timestamp=current - timedelta(days=1),
        ),
        FeedbackRecord(
            id="2",
            rating=3,
            sentiment=Sentiment.NEUTRAL,
            message=(
                "The interface is okay, but I think it could use some improvements. "
                "Loading times seem a bit slow sometimes."
            ),
            category="Website Experience",
            timestamp=current - timedelta(days=2),
        ),
    ]


class FeedbackService:
    """Submits feedback and builds sorted, summarized views of the store."""

    def __init__(
        self,
        feedback_manager: FeedbackManager,
        *,
        records: Iterable[FeedbackRecord] | None = None,
        default_sort: SortCriterion = SortCriterion.NEWEST,
    ) -> None:
        """Initialize the service around a record store.

        Args:
            feedback_manager (FeedbackManager): In-memory record store.
            records (Iterable[FeedbackRecord] | None): Records to preload, newest first.
            default_sort (SortCriterion): Ordering used when none is requested.
        """

        self._feedback_manager = feedback_manager
        self._default_sort = default_sort
        if records is not None:
            self._feedback_manager.restore(records)

    @property
    def manager(self) -> FeedbackManager:
        return self._feedback_manager

    def submit(self, draft: FeedbackDraft) -> SubmissionResult:
        """Store a draft, returning the record or the rejection reason."""

        result = self._feedback_manager.submit(draft)
        if not result.accepted:
            logger.info(
                "Feedback rejected (reason=%s)",
                result.reason.value if result.reason else "unknown",
            )
        return result

    def clear_all(self) -> int:
        return self._feedback_manager.clear_all()

    def overview(self, sort_by: str | SortCriterion | None = None) -> FeedbackOverview:
        """Compute statistics and an ordered copy of the current records.

        Args:
            sort_by (str | SortCriterion | None): Requested ordering; ``None``
                uses the configured default.

        Returns:
            FeedbackOverview: Statistics (``None`` when empty) plus records.
        """

        snapshot = self._feedback_manager.snapshot()
        criterion = sort_by if sort_by is not None else self._default_sort
        resolved = parse_criterion(criterion)
        return FeedbackOverview(
            stats=compute_stats(snapshot),
            records=sort_records(snapshot, criterion),
            sort_by=resolved.value if resolved else str(criterion),
        )
