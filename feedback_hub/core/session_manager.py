"""Feedback session list, grouping and active selection.

Updates:
    v0.1.0 - 2026-10-13 - Added session list with date-label grouping.
    v0.1.1 - 2026-10-15 - Tolerate selections that no longer match a session.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "New Session"
DEFAULT_DATE_LABEL = "Today"


@dataclass(slots=True)
class FeedbackSession:
    """Named bucket for feedback activity."""

    id: str
    title: str
    date: str
    feedback_count: int = 0

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "feedback_count": self.feedback_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FeedbackSession":
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            date=data.get("date", ""),
            feedback_count=int(data.get("feedback_count") or 0),
        )


@dataclass(slots=True, frozen=True)
class SessionGroup:
    """Sessions sharing a date label, as shown in the sidebar."""

    label: str
    sessions: tuple[FeedbackSession, ...]
    active_id: Optional[str] = None

    def is_active(self, session: FeedbackSession) -> bool:
        return self.active_id is not None and session.id == self.active_id


def group_by_date(sessions: Iterable[FeedbackSession]) -> dict[str, list[FeedbackSession]]:
    """Bucket sessions by their date label.

    Labels appear in first-seen order and each bucket keeps the input order
    of its sessions.

    Args:
        sessions (Iterable[FeedbackSession]): Sessions to group.

    Returns:
        dict[str, list[FeedbackSession]]: Sessions keyed by date label.
    """

    grouped: dict[str, list[FeedbackSession]] = {}
    for session in sessions:
        grouped.setdefault(session.date, []).append(session)
    return grouped


def _millis_id() -> str:
    return str(time.time_ns() // 1_000_000)


def _initial_sessions() -> list[FeedbackSession]:
    return [FeedbackSession(id="1", title="Current Session", date=DEFAULT_DATE_LABEL)]


@dataclass
class SessionManager:
    """Owns the sidebar sessions and the active selection."""

    sessions: list[FeedbackSession] = field(default_factory=_initial_sessions)
    active_session_id: Optional[str] = "1"
    default_title: str = DEFAULT_TITLE
    default_date_label: str = DEFAULT_DATE_LABEL
    id_factory: Callable[[], str] = field(default=_millis_id, repr=False)

    def new_session(
        self, title: Optional[str] = None, date: Optional[str] = None
    ) -> FeedbackSession:
        """Create a session at the top of the list and make it active."""

        session_id = self.id_factory()
        taken = {session.id for session in self.sessions}
        while session_id in taken:
            session_id = str(int(session_id) + 1) if session_id.isdigit() else f"{session_id}-1"

        session = FeedbackSession(
            id=session_id,
            title=title or self.default_title,
            date=date or self.default_date_label,
        )
        self.sessions.insert(0, session)
        self.active_session_id = session.id
        logger.info("session_created", extra={"session_id": session.id})
        return session

    def select(self, session_id: str) -> None:
        """Mark a session as active.

        The id is not checked against the current list; an unknown id simply
        leaves nothing highlighted.
        """

        self.active_session_id = session_id
        logger.debug("session_selected", extra={"session_id": session_id})

    def delete_all(self) -> int:
        """Remove every session and clear the selection."""

        removed = len(self.sessions)
        self.sessions.clear()
        self.active_session_id = None
        logger.info("sessions_deleted", extra={"removed": removed})
        return removed

    def search(self, query: str = "") -> list[FeedbackSession]:
        """Return sessions whose title contains ``query``, ignoring case."""

        needle = (query or "").lower()
        return [session for session in self.sessions if needle in session.title.lower()]

    def grouped(self, query: str = "") -> list[SessionGroup]:
        """Group the filtered sessions by date label for display."""

        return [
            SessionGroup(label=label, sessions=tuple(items), active_id=self.active_session_id)
            for label, items in group_by_date(self.search(query)).items()
        ]

    def active_session(self) -> Optional[FeedbackSession]:
        if self.active_session_id is None:
            return None
        for session in self.sessions:
            if session.id == self.active_session_id:
                return session
        return None


@dataclass
class SidebarState:
    """Collapsible sidebar visibility."""

    is_open: bool = True

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open
