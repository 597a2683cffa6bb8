from __future__ import annotations

import logging
import webbrowser
from typing import Any, Dict, List, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Header

from .config import DEFAULT_TITLE
from .datamodels import Post, Screen
from .html_text import html_to_text
from .navigation import NavigationState, NavInput
from .widgets import (
    TITLE_MAX_LENGTH,
    ArticleBody,
    ArticleHeader,
    Pane,
    PostRow,
    StatusBar,
    read_time,
    truncate,
)

logger = logging.getLogger("substack")

KEY_INPUTS: Dict[str, NavInput] = {
    "q": NavInput.QUIT,
    "escape": NavInput.CANCEL,
    "down": NavInput.DOWN,
    "j": NavInput.DOWN,
    "up": NavInput.UP,
    "k": NavInput.UP,
    "enter": NavInput.SELECT,
}

LIST_HINT = "↑↓ navigate   Enter read   q quit"
ARTICLE_HINT = "↑↓ scroll   o open   Esc / q back to list"


def input_for_key(key: str) -> Optional[NavInput]:
    """Decode a Textual key name into a navigation input."""
    return KEY_INPUTS.get(key)


class SubstackApp(App):
    TITLE = DEFAULT_TITLE
    SUB_TITLE = ""
    AUTO_FOCUS = None

    CSS = """
    #list-pane {
        height: 1fr;
        border: round $accent;
    }
    #article-pane {
        height: 1fr;
        display: none;
    }
    #article-header {
        height: 5;
        border: round $accent;
        padding: 0 1;
    }
    #article-scroll {
        height: 1fr;
        border: round $accent;
        padding: 0 1;
    }
    .post-row {
        height: auto;
    }
    .post-row.selected {
        color: $accent;
        text-style: bold;
    }
    StatusBar {
        dock: bottom;
        height: 1;
        background: $panel;
    }
    """

    BINDINGS = [
        Binding("o", "open_in_browser", "Open in browser"),
    ]

    def __init__(
        self,
        posts: List[Post],
        title: Optional[str] = None,
        theme: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.posts = posts
        self.state = NavigationState(post_count=len(posts))
        self._theme_name = theme
        self._article_cache: Dict[int, str] = {}
        self._shown_article: Optional[int] = None
        if title:
            self.title = title

    def compose(self) -> ComposeResult:
        yield Header()
        with Pane(id="list-pane"):
            for index, post in enumerate(self.posts):
                yield PostRow(post, index)
        with Vertical(id="article-pane"):
            yield ArticleHeader(id="article-header")
            with Pane(id="article-scroll"):
                yield ArticleBody(id="article-body")
        yield StatusBar()

    def on_mount(self) -> None:
        if self._theme_name:
            if self._theme_name in self.available_themes:
                self.theme = self._theme_name
            else:
                logger.warning("Theme '%s' not found, keeping default.", self._theme_name)
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        nav_input = input_for_key(event.key)
        if nav_input is None:
            return
        if not self.state.handle(nav_input):
            logger.debug("Unhandled %s on %s screen", nav_input.name, self.state.screen.name)
            return
        event.stop()
        event.prevent_default()
        self.refresh_view()

    def article_text(self, index: int) -> str:
        """Return the converted body of a post, converting it on first use."""
        if index not in self._article_cache:
            self._article_cache[index] = html_to_text(self.posts[index].body_html)
        return self._article_cache[index]

    def refresh_view(self) -> None:
        """Redraw whatever the navigation state says is current."""
        if self.state.quit_requested:
            self.exit()
            return

        on_list = self.state.screen is Screen.LIST
        self.query_one("#list-pane", Pane).display = on_list
        self.query_one("#article-pane", Vertical).display = not on_list
        if on_list:
            self._show_list()
        else:
            self._show_article()

    def _show_list(self) -> None:
        selected: Optional[PostRow] = None
        for row in self.query(PostRow):
            is_selected = row.post_index == self.state.selected_index
            row.set_selected(is_selected)
            if is_selected:
                selected = row
        if selected is not None:
            self.call_after_refresh(selected.scroll_visible, animate=False)

        self.sub_title = ""
        position = f"{self.state.selected_index + 1}/{len(self.posts)}" if self.posts else ""
        self.query_one(StatusBar).set_keybindings(LIST_HINT, position)

    def _show_article(self) -> None:
        index = self.state.selected_index
        post = self.posts[index]
        body = self.article_text(index)
        if self._shown_article != index:
            self.query_one(ArticleHeader).show(post)
            self.query_one(ArticleBody).show(body)
            self._shown_article = index

        # Offsets past the end are clamped by the container, leaving the tail in view
        scroll = self.query_one("#article-scroll", Pane)
        self.call_after_refresh(scroll.scroll_to, y=self.state.scroll_offset, animate=False)

        self.sub_title = f"📖 {truncate(post.title, TITLE_MAX_LENGTH)}"
        self.query_one(StatusBar).set_keybindings(ARTICLE_HINT, read_time(body))

    def action_open_in_browser(self) -> None:
        if not self.posts:
            return
        url = self.posts[self.state.selected_index].url
        logger.info("Opening %s in browser", url)
        webbrowser.open(url)
