"""Logging configuration helpers.

Updates:
    v0.1.0 - 2026-10-12 - Structured JSON log lines with ``extra`` fields.
    v0.2.0 - 2026-10-16 - Added Rich console output as an alternative format.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from rich.logging import RichHandler

_configured = False
_handler: logging.Handler | None = None

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(extra_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the fields a caller attached through ``extra``."""

    return {
        key: value
        for key, value in record.__dict__.items()
        if not key.startswith("_") and key not in _RESERVED_ATTRS
    }


def _build_handler(fmt: str) -> logging.Handler:
    if fmt == "rich":
        return RichHandler(rich_tracebacks=True, show_path=False)
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    return handler


def configure_logging(config: dict[str, Any] | None = None) -> None:
    """Install the root handler once per process.

    Args:
        config (dict[str, Any] | None): Logging section of ``settings.yaml``.
            ``level`` names the minimum level; ``format`` is ``json``
            (default) or ``rich``.
    """

    global _configured, _handler
    if _configured:
        return

    config = config or {}
    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    handler = _build_handler(str(config.get("format", "json")).lower())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    _handler = handler
    _configured = True


def set_runtime_level(level_name: str) -> None:
    """Change the active logging level.

    Args:
        level_name (str): Level name such as ``DEBUG`` or ``WARNING``.

    Raises:
        ValueError: If the name is not a logging level.
    """

    if not level_name:
        return
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    logging.getLogger().setLevel(level)
    if _handler:
        _handler.setLevel(level)
