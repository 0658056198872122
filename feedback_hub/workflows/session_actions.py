"""Sidebar session workflow dispatcher."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.session_manager import SessionManager


@dataclass
class SessionWorkflow:
    session_manager: SessionManager
    name: str = "session_actions"

    def run(self, context: dict) -> dict:
        """Dispatch ``new``, ``select``, ``delete_all`` or ``list`` actions."""

        action = context.get("action", "list")
        manager = self.session_manager
        if action == "new":
            session = manager.new_session(context.get("title"), context.get("date"))
            return {"status": "ok", "session": session}
        if action == "select":
            manager.select(str(context["session_id"]))
            return {"status": "ok", "active": manager.active_session()}
        if action == "delete_all":
            return {"status": "ok", "removed": manager.delete_all()}
        return {
            "groups": manager.grouped(context.get("query") or ""),
            "active": manager.active_session(),
        }
