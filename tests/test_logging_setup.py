from __future__ import annotations

import json
import logging
from io import StringIO

import pytest
from rich.logging import RichHandler

from feedback_hub.core import logging_setup


def test_json_formatter_includes_extra_fields() -> None:
    formatter = logging_setup.JsonFormatter()
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="feedback_submitted",
        args=(),
        exc_info=None,
    )
    record.record_id = "123"
    payload = json.loads(formatter.format(record))

    assert payload["message"] == "feedback_submitted"
    assert payload["record_id"] == "123"
    assert payload["timestamp"].endswith("Z")


def test_configure_logging_sets_json_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    stream = StringIO()

    class StubStreamHandler(logging.StreamHandler):
        def __init__(self) -> None:
            super().__init__(stream=stream)

    monkeypatch.setattr(logging_setup, "_configured", False, raising=False)
    monkeypatch.setattr(logging_setup, "_handler", None, raising=False)
    monkeypatch.setattr(logging, "StreamHandler", StubStreamHandler)

    logging_setup.configure_logging({"level": "DEBUG"})

    logging.getLogger("sample").debug("test", extra={"session_id": "1"})

    payload = json.loads(stream.getvalue().strip())
    assert payload["session_id"] == "1"
    assert logging_setup._handler is not None


def test_configure_logging_supports_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_setup, "_configured", False, raising=False)
    monkeypatch.setattr(logging_setup, "_handler", None, raising=False)

    logging_setup.configure_logging({"level": "WARNING", "format": "rich"})

    assert isinstance(logging_setup._handler, RichHandler)
    assert logging.getLogger().level == logging.WARNING


def test_set_runtime_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        logging_setup.set_runtime_level("LOUD")

    logging_setup.set_runtime_level("error")
    assert logging.getLogger().level == logging.ERROR
