"""Shared consoles for the Feedback Hub CLI."""

from __future__ import annotations

from rich.console import Console

console = Console()
# Rejections and failures go to stderr so list output stays pipeable.
error_console = Console(stderr=True)

__all__ = ["console", "error_console"]
