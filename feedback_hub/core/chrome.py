"""State for the header, chat input and model chips around the feedback panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True, frozen=True)
class NavItem:
    label: str
    active: bool = False


NAV_ITEMS: tuple[NavItem, ...] = (
    NavItem("Feedback", active=True),
    NavItem("Analytics"),
    NavItem("Customers"),
    NavItem("Insights"),
    NavItem("Settings"),
)

CHAT_MODES: tuple[str, ...] = ("Standard", "Creative", "Precise", "Balanced")


@dataclass(slots=True, frozen=True)
class ModelChip:
    id: str
    name: str
    kind: str
    highlighted: bool = False


FEATURE_CHIPS: tuple[ModelChip, ...] = (
    ModelChip("online", "Online", "feature"),
    ModelChip("genius", "Genius", "feature"),
    ModelChip("super-genius", "Super Genius", "feature"),
    ModelChip("online-genius", "Online Genius", "feature"),
    ModelChip("deep-research", "Deep Research", "feature"),
    ModelChip("deepseek", "DeepSeek V3.2", "feature", highlighted=True),
)

MODEL_CHIPS: tuple[ModelChip, ...] = (
    ModelChip("gemini-flash", "Gemini 2.5 Flash Lite", "model", highlighted=True),
    ModelChip("gemini-pro", "Gemini 3 Pro", "model"),
    ModelChip("claude", "Claude 4.5 Opus", "model"),
    ModelChip("chatgpt", "ChatGPT 4o", "model"),
    ModelChip("grok", "Grok 4", "model"),
    ModelChip("gpt5", "GPT-5.2", "model"),
)


@dataclass
class ChatComposer:
    """Chat-style message box with a response mode selector."""

    message: str = ""
    mode: str = CHAT_MODES[0]
    sent: list[str] = field(default_factory=list)

    def select_mode(self, mode: str) -> bool:
        """Switch mode; unknown modes are ignored."""

        if mode not in CHAT_MODES:
            return False
        self.mode = mode
        return True

    def send(self, message: Optional[str] = None) -> Optional[str]:
        """Send the pending (or given) message when it is not blank.

        Returns:
            str | None: The sent text, or ``None`` when nothing was sent.
        """

        if message is not None:
            self.message = message
        if not self.message.strip():
            return None
        text = self.message
        self.sent.append(text)
        self.message = ""
        return text


@dataclass
class ModelSelector:
    """Toggleable feature chips plus a single selected model."""

    selected_features: list[str] = field(default_factory=lambda: ["online"])
    selected_model: str = "gemini-flash"

    def toggle_feature(self, chip_id: str) -> bool:
        """Flip a feature chip and return whether it is now selected."""

        if chip_id not in {chip.id for chip in FEATURE_CHIPS}:
            return False
        if chip_id in self.selected_features:
            self.selected_features = [f for f in self.selected_features if f != chip_id]
            return False
        self.selected_features = [*self.selected_features, chip_id]
        return True

    def select_model(self, chip_id: str) -> bool:
        if chip_id not in {chip.id for chip in MODEL_CHIPS}:
            return False
        self.selected_model = chip_id
        return True
