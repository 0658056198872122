from __future__ import annotations

import json
from pathlib import Path

import feedback_hub.cli as cli
from feedback_hub.core.feedback_manager import FeedbackDraft
from tests.helpers.cli import make_cli_runtime


def test_fresh_state_seeds_sample_records() -> None:
    _, state = make_cli_runtime(seed_samples=True)

    assert len(state.feedback_service.manager) == 2
    assert state.session_manager.active_session().title == "Current Session"


def test_empty_saved_list_is_not_reseeded(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    _, state = make_cli_runtime(seed_samples=True)
    state.feedback_service.clear_all()
    state.save(path)

    reloaded = cli.AppState.load(path)
    _, hydrated = cli.build_runtime(
        reloaded, cli.FeedbackSettings(submit_delay_seconds=0.0, seed_samples=True)
    )

    assert reloaded.feedback_records == []
    assert len(hydrated.feedback_service.manager) == 0


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "state.json"
    _, state = make_cli_runtime()
    state.feedback_service.submit(
        FeedbackDraft(message="Fast checkout", category="Product Quality", rating=4)
    )
    state.session_manager.new_session("Sprint review", "Yesterday")
    state.sidebar.toggle()
    state.chat.select_mode("Precise")
    state.models.select_model("grok")
    state.sort_by = "rating"

    state.save(path)
    loaded = cli.AppState.load(path)
    _, hydrated = cli.build_runtime(loaded, cli.FeedbackSettings(submit_delay_seconds=0.0))

    record = hydrated.feedback_service.manager.snapshot()[0]
    assert record.message == "Fast checkout"
    assert record.rating == 4
    assert hydrated.session_manager.active_session().title == "Sprint review"
    assert loaded.sidebar.is_open is False
    assert loaded.chat.mode == "Precise"
    assert loaded.models.selected_model == "grok"
    assert loaded.sort_by == "rating"


def test_unreadable_state_starts_fresh(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    state = cli.AppState.load(path)

    assert state.feedback_records is None
    assert state.active_session_id == "1"


def test_saved_payload_is_plain_json(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    _, state = make_cli_runtime(seed_samples=True)

    state.save(path)

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert [item["id"] for item in payload["feedback_records"]] == ["1", "2"]
    assert payload["sessions"][0]["title"] == "Current Session"
    assert "feedback_service" not in payload
