from __future__ import annotations

import logging

import pytest

from feedback_hub.core.feedback_manager import FeedbackDraft, FeedbackManager
from feedback_hub.core.orchestrator import Orchestrator
from feedback_hub.core.session_manager import SessionManager
from feedback_hub.services.feedback_service import FeedbackService
from feedback_hub.workflows.feedback_loop import FeedbackWorkflow
from feedback_hub.workflows.session_actions import SessionWorkflow
from tests.helpers.cli import make_clock


def _orchestrator() -> Orchestrator:
    orchestrator = Orchestrator()
    orchestrator.register(
        FeedbackWorkflow(FeedbackService(FeedbackManager(clock=make_clock())))
    )
    orchestrator.register(SessionWorkflow(SessionManager(id_factory=lambda: "42")))
    return orchestrator


def test_feedback_submit_from_fields_and_draft() -> None:
    orchestrator = _orchestrator()

    from_fields = orchestrator.execute(
        "feedback_loop",
        {
            "action": "submit",
            "message": "Support was quick",
            "category": "Customer Service",
            "rating": 4,
            "sentiment": "neutral",
        },
    )
    from_draft = orchestrator.execute(
        "feedback_loop",
        {"action": "submit", "draft": FeedbackDraft(message="Bug", category="Bug Report")},
    )

    assert from_fields["status"] == "ok"
    assert from_fields["record"].sentiment.value == "neutral"
    assert from_draft["record"].rating is None

    overview = orchestrator.execute("feedback_loop", {"action": "overview"})["overview"]
    assert overview.stats.count == 2


def test_feedback_submit_rejection_is_reported() -> None:
    orchestrator = _orchestrator()

    result = orchestrator.execute(
        "feedback_loop", {"action": "submit", "message": "", "category": "Bug Report"}
    )

    assert result["status"] == "rejected"
    assert result["reason"] == "empty_message"


def test_feedback_clear_reports_removed() -> None:
    orchestrator = _orchestrator()
    orchestrator.execute(
        "feedback_loop", {"action": "submit", "message": "x", "category": "Bug Report"}
    )

    result = orchestrator.execute("feedback_loop", {"action": "clear"})

    assert result == {"status": "ok", "removed": 1}


def test_session_actions() -> None:
    orchestrator = _orchestrator()

    created = orchestrator.execute("session_actions", {"action": "new", "title": "Launch"})
    assert created["session"].id == "42"

    selected = orchestrator.execute("session_actions", {"action": "select", "session_id": 1})
    assert selected["active"].title == "Current Session"

    listed = orchestrator.execute("session_actions", {"action": "list", "query": "laun"})
    assert [group.label for group in listed["groups"]] == ["Today"]

    removed = orchestrator.execute("session_actions", {"action": "delete_all"})
    assert removed["removed"] == 2


def test_unknown_workflow_raises() -> None:
    with pytest.raises(KeyError):
        Orchestrator().execute("missing", {})


def test_orchestrator_logs_failures(caplog: pytest.LogCaptureFixture) -> None:
    class Broken:
        name = "broken"

        def run(self, context: dict) -> dict:
            raise RuntimeError("boom")

    orchestrator = Orchestrator()
    orchestrator.register(Broken())

    with caplog.at_level(logging.ERROR, logger="feedback_hub.core.orchestrator"):
        with pytest.raises(RuntimeError):
            orchestrator.execute("broken", {"action": "go"})

    record = next(r for r in caplog.records if r.getMessage() == "workflow_failed")
    assert record.workflow == "broken"
    assert record.action == "go"
