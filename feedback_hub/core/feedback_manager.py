"""Feedback record store.

Updates:
    v0.1.0 - 2026-10-12 - Added record, draft and submission result types.
    v0.2.0 - 2026-10-14 - Switched to newest-first storage and explicit rejection reasons.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Iterable, Optional

logger = logging.getLogger(__name__)

CATEGORIES: tuple[str, ...] = (
    "Product Quality",
    "Customer Service",
    "Website Experience",
    "Delivery/Pricing",
    "Feature Request",
    "Bug Report",
    "General Feedback",
)


class Sentiment(str, Enum):
    """Tone of a feedback entry."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class RejectionReason(str, Enum):
    """Why a draft was not accepted into the store."""

    EMPTY_MESSAGE = "empty_message"
    MISSING_CATEGORY = "missing_category"
    UNKNOWN_CATEGORY = "unknown_category"
    INVALID_RATING = "invalid_rating"
    SUBMITTING = "submitting"
    SUBMIT_FAILED = "submit_failed"


def derive_sentiment(rating: Optional[int]) -> Sentiment:
    """Map a star rating to its default sentiment.

    Args:
        rating (int | None): Rating between 1 and 5, or ``None`` when unrated.

    Returns:
        Sentiment: ``positive`` for 4-5, ``negative`` for 1-2 or unrated,
        ``neutral`` for 3.
    """

    # unrated counts as zero stars
    score = rating or 0
    if score >= 4:
        return Sentiment.POSITIVE
    if score <= 2:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


@dataclass(slots=True, frozen=True)
class FeedbackDraft:
    """User-entered values awaiting submission."""

    message: str = ""
    category: Optional[str] = None
    rating: Optional[int] = None
    sentiment: Optional[Sentiment] = None
    user_name: Optional[str] = None


@dataclass(slots=True, frozen=True)
class FeedbackRecord:
    """A submitted feedback entry."""

    id: str
    message: str
    category: str
    timestamp: datetime
    rating: Optional[int] = None
    sentiment: Sentiment = Sentiment.NEUTRAL
    user_name: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "rating": self.rating,
            "sentiment": self.sentiment.value,
            "message": self.message,
            "category": self.category,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "user_name": self.user_name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FeedbackRecord":
        raw_timestamp = str(data["timestamp"]).replace("Z", "+00:00")
        timestamp = datetime.fromisoformat(raw_timestamp)
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return cls(
            id=str(data["id"]),
            message=data["message"],
            category=data["category"],
            timestamp=timestamp,
            rating=data.get("rating"),
            sentiment=Sentiment(data.get("sentiment") or Sentiment.NEUTRAL.value),
            user_name=data.get("user_name"),
        )


@dataclass(slots=True, frozen=True)
class SubmissionResult:
    """Outcome of a submission attempt."""

    accepted: bool
    record: Optional[FeedbackRecord] = None
    reason: Optional[RejectionReason] = None

    @classmethod
    def ok(cls, record: FeedbackRecord) -> "SubmissionResult":
        return cls(accepted=True, record=record)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "SubmissionResult":
        return cls(accepted=False, reason=reason)


def validate_draft(draft: FeedbackDraft) -> Optional[RejectionReason]:
    """Return the first reason the draft cannot be stored, or ``None``."""

    if not draft.message or not draft.message.strip():
        return RejectionReason.EMPTY_MESSAGE
    if not draft.category:
        return RejectionReason.MISSING_CATEGORY
    if draft.category not in CATEGORIES:
        return RejectionReason.UNKNOWN_CATEGORY
    if draft.rating is not None and not 1 <= draft.rating <= 5:
        return RejectionReason.INVALID_RATING
    return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _record_list() -> list[FeedbackRecord]:
    return []


@dataclass
class FeedbackManager:
    """Holds submitted feedback, newest first."""

    entries: list[FeedbackRecord] = field(default_factory=_record_list)
    clock: Callable[[], datetime] = field(default=_utcnow, repr=False)
    _last_id: int = field(default=0, init=False, repr=False)

    def submit(self, draft: FeedbackDraft) -> SubmissionResult:
        """Validate a draft and prepend it to the store.

        Args:
            draft (FeedbackDraft): Values entered by the user.

        Returns:
            SubmissionResult: The stored record, or the rejection reason. The
            store is untouched when the draft is rejected.
        """

        reason = validate_draft(draft)
        if reason is not None:
            logger.debug("feedback_rejected", extra={"reason": reason.value})
            return SubmissionResult.rejected(reason)

        timestamp = self.clock()
        record = FeedbackRecord(
            id=self._next_id(timestamp),
            message=draft.message,
            category=draft.category or "",
            timestamp=timestamp,
            rating=draft.rating,
            sentiment=draft.sentiment or derive_sentiment(draft.rating),
            user_name=draft.user_name or None,
        )
        self.entries.insert(0, record)
        logger.info(
            "feedback_submitted",
            extra={"record_id": record.id, "category": record.category},
        )
        return SubmissionResult.ok(record)

    def clear_all(self) -> int:
        """Drop every stored record and return how many were removed."""

        removed = len(self.entries)
        self.entries.clear()
        logger.info("feedback_cleared", extra={"removed": removed})
        return removed

    def restore(self, records: Iterable[FeedbackRecord]) -> None:
        """Replace the store with already materialized records, order preserved."""

        self.entries = list(records)
        for record in self.entries:
            if record.id.isdigit():
                self._last_id = max(self._last_id, int(record.id))

    def snapshot(self) -> list[FeedbackRecord]:
        """Return a copy of the stored records in storage order."""

        return list(self.entries)

    @property
    def records(self) -> list[FeedbackRecord]:
        return self.snapshot()

    def __len__(self) -> int:
        return len(self.entries)

    def _next_id(self, timestamp: datetime) -> str:
        candidate = int(timestamp.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

