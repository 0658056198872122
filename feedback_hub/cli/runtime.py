"""Runtime wiring for the Feedback Hub CLI."""

from __future__ import annotations

import logging
from typing import Any

from feedback_hub.cli.state import AppState
from feedback_hub.core.feedback_manager import FeedbackManager, FeedbackRecord
from feedback_hub.core.logging_setup import configure_logging
from feedback_hub.core.logging_setup import set_runtime_level  # re-export via utils
from feedback_hub.core.orchestrator import Orchestrator
from feedback_hub.core.session_manager import FeedbackSession, SessionManager
from feedback_hub.services.config_service import ConfigService, FeedbackSettings
from feedback_hub.services.feedback_service import FeedbackService, sample_records
from feedback_hub.workflows.feedback_loop import FeedbackWorkflow
from feedback_hub.workflows.session_actions import SessionWorkflow

logger = logging.getLogger(__name__)

_RUNTIME_CACHE: tuple[Orchestrator, AppState] | None = None


def build_runtime(
    state: AppState, settings: FeedbackSettings, config_service: Any = None
) -> tuple[Orchestrator, AppState]:
    """Attach live stores to ``state`` and register the workflows.

    Args:
        state (AppState): Snapshot loaded from disk (or a fresh one).
        settings (FeedbackSettings): Feedback behaviour settings.
        config_service (ConfigService | None): Source of session defaults.

    Returns:
        tuple[Orchestrator, AppState]: Ready orchestrator and hydrated state.
    """

    if state.feedback_records is None:
        records = sample_records() if settings.seed_samples else []
    else:
        records = [FeedbackRecord.from_dict(item) for item in state.feedback_records]
    feedback_service = FeedbackService(
        feedback_manager=FeedbackManager(),
        records=records,
        default_sort=settings.default_sort,
    )

    session_manager = SessionManager()
    if config_service is not None:
        session_settings = config_service.session_settings
        session_manager.default_title = session_settings.default_title
        session_manager.default_date_label = session_settings.default_date_label
    if state.sessions is not None:
        session_manager.sessions = [FeedbackSession.from_dict(item) for item in state.sessions]
        session_manager.active_session_id = state.active_session_id

    orchestrator = Orchestrator(
        workflows={
            "feedback_loop": FeedbackWorkflow(feedback_service=feedback_service),
            "session_actions": SessionWorkflow(session_manager=session_manager),
        }
    )
    state.feedback_service = feedback_service
    state.session_manager = session_manager
    state.feedback_settings = settings
    return orchestrator, state


def initialize_runtime() -> tuple[Orchestrator, AppState]:
    """Load configuration and the session snapshot, then wire the runtime."""

    config_service_cls = _resolve_dependency("ConfigService", ConfigService)
    config_service = config_service_cls()
    configure_logging(config_service.logging_config)
    logger.debug("Runtime initialization starting.")

    settings = config_service.feedback_settings
    state = AppState.load()
    orchestrator, state = build_runtime(state, settings, config_service)
    logger.debug(
        "Runtime ready (records=%s, sessions=%s).",
        len(state.feedback_service.manager) if state.feedback_service else 0,
        len(state.session_manager.sessions) if state.session_manager else 0,
    )
    return orchestrator, state


def get_runtime() -> tuple[Orchestrator, AppState]:
    """Return the lazily-initialized orchestrator and CLI state."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: tuple[Orchestrator, AppState] | None) -> None:
    """Replace the cached runtime tuple."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_orchestrator() -> Orchestrator:
    orchestrator, _ = get_runtime()
    return orchestrator


def get_state() -> AppState:
    _, state = get_runtime()
    return state


def _resolve_dependency(name: str, default: Any) -> Any:
    """Return a dependency, preferring overrides on the cli package."""

    from sys import modules

    cli_module = modules.get("feedback_hub.cli")
    if cli_module is not None and hasattr(cli_module, name):
        return getattr(cli_module, name)
    return default


__all__ = [
    "build_runtime",
    "get_orchestrator",
    "get_runtime",
    "get_state",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
]
