from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.containers import VerticalScroll
from textual.reactive import reactive
from textual.widgets import Static

from .config import WORDS_PER_MINUTE
from .datamodels import Post

HIGHLIGHT_SYMBOL = "▶ "
TITLE_MAX_LENGTH = 58


def truncate(s: str, max_length: int) -> str:
    return s if len(s) <= max_length else s[: max_length - 1] + "…"


def format_list_item(post: Post) -> str:
    marker = "  " if post.free else "🔒 "
    return f"{marker}[{post.date}] {post.title}"


def read_time(text: str) -> str:
    minutes = max(1, round(len(text.split()) / WORDS_PER_MINUTE))
    return f"~{minutes} min read"


# --- UI Widgets ---
class Pane(VerticalScroll, can_focus=False):
    """Scrollable region that never takes focus, so keys reach the app."""


class PostRow(Static):
    """One post in the list pane.

    A plain Static rather than a ListItem: the highlighted row follows
    NavigationState.selected_index instead of a ListView cursor.
    """

    def __init__(self, post: Post, index: int):
        super().__init__(classes="post-row")
        self.post = post
        self.post_index = index
        self.label = format_list_item(post)

    def on_mount(self) -> None:
        self.set_selected(self.has_class("selected"))

    def set_selected(self, selected: bool) -> None:
        self.set_class(selected, "selected")
        prefix = HIGHLIGHT_SYMBOL if selected else " " * len(HIGHLIGHT_SYMBOL)
        self.update(Text(prefix + self.label))


class ArticleHeader(Static):
    def show(self, post: Post) -> None:
        badge = "  🟢 free" if post.free else "  🔒 paid"
        text = Text()
        text.append(post.date + badge, style="yellow")
        text.append("\n")
        text.append(post.subtitle)
        text.append("\n")
        text.append(post.url, style="dim blue")
        self.update(text)


class ArticleBody(Static):
    def show(self, body: str) -> None:
        self.update(Text(body))


class StatusBar(Static):
    position = reactive("")
    keybinding_hint = reactive("")

    def on_mount(self) -> None:
        self.update_display()

    def set_keybindings(self, hint: str, position: Optional[str] = None) -> None:
        """Set the keybinding hint text."""
        self.keybinding_hint = hint
        self.position = position or ""

    def update_display(self) -> None:
        """Update the status bar display."""
        status_items = []
        if self.position:
            status_items.append(self.position)

        if self.keybinding_hint:
            status_items.append(self.keybinding_hint)

        self.update(Text("  " + " | ".join(status_items)))

    def watch_position(self, position: str) -> None:
        self.update_display()

    def watch_keybinding_hint(self, keybinding_hint: str) -> None:
        self.update_display()
