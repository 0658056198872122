"""Feedback workflow dispatcher.

Updates:
    v0.1.0 - 2026-10-13 - Added submit, clear and overview actions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.feedback_manager import FeedbackDraft, Sentiment
from ..services.feedback_service import FeedbackService


@dataclass
class FeedbackWorkflow:
    feedback_service: FeedbackService
    name: str = "feedback_loop"

    def run(self, context: dict) -> dict:
        """Dispatch actions to the feedback service.

        Args:
            context (dict): ``action`` plus its payload. ``submit`` reads
                ``message``, ``category``, ``rating``, ``sentiment`` and
                ``user_name``; ``overview`` reads ``sort_by``.

        Returns:
            dict: ``status`` for submit and clear, the overview otherwise.
        """

        action = context.get("action", "overview")
        if action == "submit":
            draft = context.get("draft")
            if not isinstance(draft, FeedbackDraft):
                sentiment = context.get("sentiment")
                draft = FeedbackDraft(
                    message=context.get("message", ""),
                    category=context.get("category"),
                    rating=context.get("rating"),
                    sentiment=Sentiment(sentiment) if sentiment else None,
                    user_name=context.get("user_name"),
                )
            result = self.feedback_service.submit(draft)
            if not result.accepted:
                return {"status": "rejected", "reason": result.reason.value, "result": result}
            return {"status": "ok", "record": result.record, "result": result}
        if action == "clear":
            return {"status": "ok", "removed": self.feedback_service.clear_all()}
        return {"overview": self.feedback_service.overview(context.get("sort_by"))}
