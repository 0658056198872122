from __future__ import annotations

from feedback_hub.core.chrome import (
    CHAT_MODES,
    NAV_ITEMS,
    ChatComposer,
    ModelSelector,
)


def test_feedback_is_the_active_nav_item() -> None:
    active = [item.label for item in NAV_ITEMS if item.active]

    assert active == ["Feedback"]


def test_chat_send_ignores_blank_messages() -> None:
    chat = ChatComposer()

    assert chat.send("   ") is None
    assert chat.sent == []

    assert chat.send("hello there") == "hello there"
    assert chat.message == ""
    assert chat.sent == ["hello there"]


def test_chat_mode_only_accepts_known_modes() -> None:
    chat = ChatComposer()

    assert chat.mode == CHAT_MODES[0]
    assert chat.select_mode("Creative")
    assert not chat.select_mode("Chaotic")
    assert chat.mode == "Creative"


def test_feature_toggle_flips_selection() -> None:
    models = ModelSelector()

    assert models.selected_features == ["online"]
    assert models.toggle_feature("genius") is True
    assert models.toggle_feature("online") is False
    assert models.selected_features == ["genius"]
    assert models.toggle_feature("unknown") is False
    assert models.selected_features == ["genius"]


def test_model_selection_rejects_unknown_ids() -> None:
    models = ModelSelector()

    assert models.select_model("claude")
    assert not models.select_model("nope")
    assert models.selected_model == "claude"
