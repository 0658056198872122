"""Configuration service for Feedback Hub.

Updates:
    v0.1.0 - 2026-10-12 - Exposed app, logging, feedback and session sections.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader
from ..core.feedback_form import DEFAULT_SUBMIT_DELAY
from ..core.session_manager import DEFAULT_DATE_LABEL, DEFAULT_TITLE
from .feedback_sorter import SortCriterion, parse_criterion

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0", ""}


def _as_bool(value: Any, key: str) -> bool:
    """Read a flag that may arrive as a string after env expansion."""

    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}.")


@dataclass(slots=True, frozen=True)
class FeedbackSettings:
    """Behaviour of the feedback form and list."""

    submit_delay_seconds: float = DEFAULT_SUBMIT_DELAY
    seed_samples: bool = True
    default_sort: SortCriterion = SortCriterion.NEWEST


@dataclass(slots=True, frozen=True)
class SessionSettings:
    default_title: str = DEFAULT_TITLE
    default_date_label: str = DEFAULT_DATE_LABEL


class ConfigService:
    """Loads and exposes configuration for Feedback Hub components."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Load ``settings.yaml`` from the configuration directory.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        self._loader = ConfigLoader(base_path=config_path)
        self._settings = self._expand_env_values(self._loader.load("settings"))

    @property
    def config_path(self) -> Path:
        return self._loader.base_path

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        return self._section("app")

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        return self._section("logging")

    @property
    def feedback_settings(self) -> FeedbackSettings:
        """Return feedback form and list settings.

        Raises:
            ValueError: If the delay is negative, the default sort is unknown
                or ``seed_samples`` is not a boolean.
        """

        section = self._section("feedback")
        delay = float(section.get("submit_delay_seconds", DEFAULT_SUBMIT_DELAY))
        if delay < 0:
            raise ValueError("feedback.submit_delay_seconds must not be negative.")
        default_sort = parse_criterion(section.get("default_sort", SortCriterion.NEWEST))
        if default_sort is None:
            raise ValueError(
                f"Unknown feedback.default_sort '{section.get('default_sort')}'."
            )
        return FeedbackSettings(
            submit_delay_seconds=delay,
            seed_samples=_as_bool(section.get("seed_samples", True), "feedback.seed_samples"),
            default_sort=default_sort,
        )

    @property
    def session_settings(self) -> SessionSettings:
        section = self._section("sessions")
        return SessionSettings(
            default_title=str(section.get("default_title") or DEFAULT_TITLE),
            default_date_label=str(section.get("default_date_label") or DEFAULT_DATE_LABEL),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "app": self.app_metadata,
            "logging": self.logging_config,
            "feedback": self._section("feedback"),
            "sessions": self._section("sessions"),
        }

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()

    def _section(self, name: str) -> dict[str, Any]:
        section = self._settings.get(name, {})
        return dict(section) if isinstance(section, dict) else {}

    @staticmethod
    def _expand_env_values(value: Any) -> Any:
        if isinstance(value, dict):
            return {key: ConfigService._expand_env_values(entry) for key, entry in value.items()}
        if isinstance(value, list):
            return [ConfigService._expand_env_values(item) for item in value]
        if isinstance(value, str):
            return os.path.expandvars(value)
        return value
