"""CLI session snapshot."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, TYPE_CHECKING

from feedback_hub.core.chrome import ChatComposer, ModelSelector
from feedback_hub.core.session_manager import SidebarState

if TYPE_CHECKING:
    from feedback_hub.core.session_manager import SessionManager
    from feedback_hub.services.config_service import FeedbackSettings
    from feedback_hub.services.feedback_service import FeedbackService

PROJECT_ROOT = Path(__file__).resolve().parents[2]
STATE_PATH = Path(
    os.environ.get("FEEDBACK_HUB_STATE_PATH", PROJECT_ROOT / "data" / "state.json")
)

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Serializable state carried between CLI invocations.

    ``feedback_records`` and ``sessions`` stay ``None`` until the first save,
    which tells the runtime to start from the default screen contents.
    """

    feedback_records: Optional[list[dict[str, Any]]] = None
    sessions: Optional[list[dict[str, Any]]] = None
    active_session_id: Optional[str] = "1"
    sort_by: Optional[str] = None
    sidebar: SidebarState = field(default_factory=SidebarState)
    chat: ChatComposer = field(default_factory=ChatComposer)
    models: ModelSelector = field(default_factory=ModelSelector)
    feedback_service: Optional["FeedbackService"] = field(
        default=None, repr=False, compare=False
    )
    session_manager: Optional["SessionManager"] = field(
        default=None, repr=False, compare=False
    )
    feedback_settings: Optional["FeedbackSettings"] = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def load(cls, path: Path = STATE_PATH) -> "AppState":
        """Load the snapshot from disk; unreadable files start a fresh state."""

        data: dict[str, Any] = {}
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.warning("state_unreadable", extra={"path": str(path), "error": str(exc)})
                data = {}

        chat = data.get("chat") or {}
        models = data.get("models") or {}
        return cls(
            feedback_records=data.get("feedback_records"),
            sessions=data.get("sessions"),
            active_session_id=data.get("active_session_id", "1"),
            sort_by=data.get("sort_by"),
            sidebar=SidebarState(is_open=bool(data.get("sidebar_open", True))),
            chat=ChatComposer(
                mode=chat.get("mode", ChatComposer().mode),
                sent=list(chat.get("sent", [])),
            ),
            models=ModelSelector(
                selected_features=list(models.get("selected_features", ["online"])),
                selected_model=models.get("selected_model", "gemini-flash"),
            ),
        )

    def sync(self) -> None:
        """Copy the live feedback and session stores into the snapshot fields."""

        if self.feedback_service is not None:
            self.feedback_records = [
                record.as_dict() for record in self.feedback_service.manager.snapshot()
            ]
        if self.session_manager is not None:
            self.sessions = [session.as_dict() for session in self.session_manager.sessions]
            self.active_session_id = self.session_manager.active_session_id

    def save(self, path: Path = STATE_PATH) -> None:
        """Persist the snapshot to disk."""

        self.sync()
        payload = {
            "feedback_records": self.feedback_records,
            "sessions": self.sessions,
            "active_session_id": self.active_session_id,
            "sort_by": self.sort_by,
            "sidebar_open": self.sidebar.is_open,
            "chat": {"mode": self.chat.mode, "sent": self.chat.sent},
            "models": {
                "selected_features": self.models.selected_features,
                "selected_model": self.models.selected_model,
            },
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


__all__ = ["AppState", "PROJECT_ROOT", "STATE_PATH"]
