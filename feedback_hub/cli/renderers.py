"""Rich renderers for CLI outputs."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.panel import Panel
from rich.table import Table

from feedback_hub.cli.io import console
from feedback_hub.core.chrome import (
    CHAT_MODES,
    FEATURE_CHIPS,
    MODEL_CHIPS,
    NAV_ITEMS,
    ChatComposer,
    ModelSelector,
)
from feedback_hub.core.feedback_form import RATING_LABELS
from feedback_hub.core.feedback_manager import CATEGORIES, FeedbackRecord, Sentiment
from feedback_hub.core.session_manager import FeedbackSession, SessionGroup
from feedback_hub.services.feedback_service import FeedbackOverview
from feedback_hub.services.feedback_sorter import SORT_LABELS, parse_criterion

SENTIMENT_STYLES = {
    Sentiment.POSITIVE: "green",
    Sentiment.NEGATIVE: "red",
    Sentiment.NEUTRAL: "yellow",
}


def format_stars(rating: Optional[int]) -> str:
    filled = rating or 0
    return "★" * filled + "☆" * (5 - filled)


def render_feedback_record(record: FeedbackRecord) -> Panel:
    """Build the card shown for one feedback entry."""

    style = SENTIMENT_STYLES[record.sentiment]
    rating_text = f"{record.rating}/5" if record.rating is not None else "unrated"
    lines = [
        f"[yellow]{format_stars(record.rating)}[/] {rating_text}"
        f"  [{style}]{record.sentiment.value.capitalize()}[/]"
        f"  [dim]{record.timestamp.date().isoformat()}[/]",
        f"[bold]Category:[/] {record.category}",
        "",
        record.message,
    ]
    if record.user_name:
        lines.append(f"\n[dim]- {record.user_name}[/]")
    return Panel("\n".join(lines), border_style=style, title=f"#{record.id}")


def render_feedback_overview(overview: FeedbackOverview) -> None:
    """Display statistics and the ordered feedback list."""

    total = overview.stats.count if overview.stats else 0
    criterion = parse_criterion(overview.sort_by)
    sort_label = SORT_LABELS[criterion] if criterion else overview.sort_by
    console.print(f"[bold]Feedback ({total})[/]  [dim]{sort_label}[/]")

    if not overview.has_data:
        console.print(
            Panel(
                "Feedback submissions will appear here once users start sharing their thoughts.",
                title="No feedback yet",
            )
        )
        return

    render_feedback_stats(overview)
    for record in overview.records:
        console.print(render_feedback_record(record))


def render_feedback_stats(overview: FeedbackOverview) -> None:
    stats = overview.stats
    if stats is None:
        console.print(Panel("No data to summarize yet.", title="Statistics"))
        return

    table = Table(title="Statistics")
    table.add_column("Total Responses", justify="right")
    table.add_column("Average Rating", justify="right")
    table.add_column("Positive Feedback", justify="right")
    table.add_row(str(stats.count), stats.average_display, str(stats.positive_count))
    console.print(table)

    if stats.category_breakdown:
        categories = Table(title="By Category")
        categories.add_column("Category")
        categories.add_column("Count", justify="right")
        for name, count in stats.category_breakdown.items():
            categories.add_row(name, str(count))
        console.print(categories)


def render_submission(record: FeedbackRecord) -> None:
    label = RATING_LABELS.get(record.rating or 0)
    title = f"Feedback submitted ({label})" if label else "Feedback submitted"
    console.print(render_feedback_record(record))
    console.print(f"[green]{title}.[/]")


def render_session_groups(groups: Iterable[SessionGroup], *, sidebar_open: bool = True) -> None:
    """Render the sidebar session list grouped by date label."""

    groups = list(groups)
    if not sidebar_open:
        console.print("[dim]Sidebar is collapsed. Use `sidebar toggle` to open it.[/]")
    if not groups:
        console.print(Panel("No sessions found", title="Feedback Sessions"))
        return

    lines: list[str] = []
    for group in groups:
        lines.append(f"[bold]{group.label}[/]")
        for session in group.sessions:
            marker = "[cyan]>[/]" if group.is_active(session) else " "
            lines.append(
                f"{marker} {session.title} [dim]({session.feedback_count} feedback items, id {session.id})[/]"
            )
        lines.append("")
    console.print(Panel("\n".join(lines).rstrip(), title="Feedback Sessions"))


def render_session(session: FeedbackSession, *, title: str) -> None:
    console.print(Panel(f"{session.title} [dim]({session.date}, id {session.id})[/]", title=title))


def render_header() -> None:
    items = [f"[bold]{item.label}[/]" if item.active else f"[dim]{item.label}[/]" for item in NAV_ITEMS]
    console.print(Panel("  ".join(items), title="Feedback Hub"))


def render_categories() -> None:
    table = Table(title="Categories")
    table.add_column("#", justify="right")
    table.add_column("Category")
    for idx, category in enumerate(CATEGORIES, start=1):
        table.add_row(str(idx), category)
    console.print(table)


def render_chat(chat: ChatComposer) -> None:
    modes = "  ".join(f"[bold]{mode}[/]" if mode == chat.mode else mode for mode in CHAT_MODES)
    history = "\n".join(f"- {message}" for message in chat.sent[-5:]) or "[dim]No messages sent.[/]"
    console.print(Panel(f"Mode: {modes}\n\n{history}", title="Chat"))


def render_models(models: ModelSelector) -> None:
    table = Table(title="Model Chips")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Selected", justify="center")
    for chip in (*FEATURE_CHIPS, *MODEL_CHIPS):
        if chip.kind == "feature":
            selected = chip.id in models.selected_features
        else:
            selected = chip.id == models.selected_model
        name = f"* {chip.name}" if chip.highlighted else chip.name
        table.add_row(chip.id, name, chip.kind, "x" if selected else "")
    console.print(table)


__all__ = [
    "format_stars",
    "render_categories",
    "render_chat",
    "render_feedback_overview",
    "render_feedback_record",
    "render_feedback_stats",
    "render_header",
    "render_models",
    "render_session",
    "render_session_groups",
    "render_submission",
]
