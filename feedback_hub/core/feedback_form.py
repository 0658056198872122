"""Editable feedback draft with the submit-control behaviour.

Updates:
    v0.1.0 - 2026-10-13 - Added draft editing and rating-driven sentiment.
    v0.2.0 - 2026-10-16 - Added simulated submission delay with disabled state.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .feedback_manager import (
    FeedbackDraft,
    RejectionReason,
    Sentiment,
    SubmissionResult,
    derive_sentiment,
    validate_draft,
)

logger = logging.getLogger(__name__)

DEFAULT_SUBMIT_DELAY = 0.8

RATING_LABELS = {
    1: "Poor",
    2: "Fair",
    3: "Good",
    4: "Very Good",
    5: "Excellent",
}

SubmitCallback = Callable[[FeedbackDraft], Optional[SubmissionResult]]


@dataclass
class FeedbackForm:
    """Mutable form state that feeds the record store."""

    rating: Optional[int] = None
    sentiment: Sentiment = derive_sentiment(None)
    message: str = ""
    category: Optional[str] = None
    user_name: Optional[str] = None
    is_submitting: bool = False
    submit_delay: float = DEFAULT_SUBMIT_DELAY
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def set_rating(self, rating: Optional[int]) -> None:
        """Set the star rating and re-derive the sentiment from it.

        Picking the rating already shown keeps any sentiment override.
        """

        if rating == self.rating:
            return
        self.rating = rating
        self.sentiment = derive_sentiment(rating)

    def set_sentiment(self, sentiment: Sentiment | str) -> None:
        """Override the derived sentiment until the rating changes again."""

        self.sentiment = Sentiment(sentiment)

    def set_message(self, message: str) -> None:
        self.message = message

    def set_category(self, category: Optional[str]) -> None:
        self.category = category or None

    @property
    def rating_label(self) -> str:
        return RATING_LABELS.get(self.rating or 0, "")

    @property
    def can_submit(self) -> bool:
        """Whether the submit control is enabled."""

        return bool(self.message.strip()) and bool(self.category) and not self.is_submitting

    def to_draft(self) -> FeedbackDraft:
        return FeedbackDraft(
            message=self.message,
            category=self.category,
            rating=self.rating,
            sentiment=self.sentiment,
            user_name=self.user_name,
        )

    def reset(self) -> None:
        self.rating = None
        self.sentiment = derive_sentiment(None)
        self.message = ""
        self.category = None
        self.user_name = None

    def submit(self, on_submit: SubmitCallback) -> SubmissionResult:
        """Run a submission through the simulated delay.

        While the delay runs the form reports ``is_submitting`` and further
        calls are rejected. Errors raised by the delay or the callback are
        logged and swallowed; the form keeps its values in that case.

        Args:
            on_submit (SubmitCallback): Receives the draft once the delay elapses.

        Returns:
            SubmissionResult: Result reported by the callback, or a rejection.
        """

        if self.is_submitting:
            return SubmissionResult.rejected(RejectionReason.SUBMITTING)

        draft = self.to_draft()
        reason = validate_draft(draft)
        if reason is not None:
            return SubmissionResult.rejected(reason)

        self.is_submitting = True
        try:
            self.sleep(self.submit_delay)
            result = on_submit(draft)
            if result is None:
                result = SubmissionResult(accepted=True)
            if result.accepted:
                self.reset()
            return result
        except Exception:
            logger.exception("feedback_submit_failed")
            return SubmissionResult.rejected(RejectionReason.SUBMIT_FAILED)
        finally:
            self.is_submitting = False
