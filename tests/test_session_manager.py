from __future__ import annotations

from itertools import count

from feedback_hub.core.session_manager import (
    FeedbackSession,
    SessionManager,
    SidebarState,
    group_by_date,
)


def _sequential_ids(start: int = 100):
    counter = count(start)
    return lambda: str(next(counter))


def test_initial_state_has_current_session_active() -> None:
    manager = SessionManager()

    assert [session.title for session in manager.sessions] == ["Current Session"]
    assert manager.active_session().id == "1"


def test_group_by_date_preserves_first_seen_order() -> None:
    sessions = [
        FeedbackSession(id="a", title="A", date="Today"),
        FeedbackSession(id="b", title="B", date="Today"),
        FeedbackSession(id="c", title="C", date="Yesterday"),
        FeedbackSession(id="d", title="D", date="Today"),
    ]

    grouped = group_by_date(sessions)

    assert list(grouped) == ["Today", "Yesterday"]
    assert [s.id for s in grouped["Today"]] == ["a", "b", "d"]
    assert [s.id for s in grouped["Yesterday"]] == ["c"]
    assert group_by_date([]) == {}


def test_new_session_is_prepended_and_selected() -> None:
    manager = SessionManager(id_factory=_sequential_ids())

    session = manager.new_session()

    assert manager.sessions[0] is session
    assert session.title == "New Session"
    assert session.date == "Today"
    assert session.feedback_count == 0
    assert manager.active_session_id == session.id


def test_new_session_avoids_id_collisions() -> None:
    manager = SessionManager(id_factory=lambda: "1")

    session = manager.new_session("Retro", "Yesterday")

    assert session.id == "2"
    assert {s.id for s in manager.sessions} == {"1", "2"}


def test_select_unknown_id_leaves_nothing_highlighted() -> None:
    manager = SessionManager()

    manager.select("missing")

    assert manager.active_session_id == "missing"
    assert manager.active_session() is None
    groups = manager.grouped()
    assert not any(group.is_active(s) for group in groups for s in group.sessions)


def test_delete_all_clears_sessions_and_selection() -> None:
    manager = SessionManager(id_factory=_sequential_ids())
    manager.new_session()

    assert manager.delete_all() == 2
    assert manager.sessions == []
    assert manager.active_session_id is None
    assert manager.grouped() == []


def test_search_filters_case_insensitively_before_grouping() -> None:
    manager = SessionManager(id_factory=_sequential_ids())
    manager.new_session("Checkout review", "Yesterday")
    manager.new_session("Onboarding", "Today")

    assert [s.title for s in manager.search("CHECK")] == ["Checkout review"]
    groups = manager.grouped("o")
    assert [group.label for group in groups] == ["Today", "Yesterday"]
    assert [s.title for s in groups[0].sessions] == ["Onboarding", "Current Session"]


def test_session_dict_round_trip() -> None:
    session = FeedbackSession(id="7", title="Weekly", date="Today", feedback_count=3)

    assert FeedbackSession.from_dict(session.as_dict()) == session


def test_sidebar_toggle() -> None:
    sidebar = SidebarState()

    assert sidebar.toggle() is False
    assert sidebar.toggle() is True
