from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .datamodels import Screen


class NavInput(Enum):
    QUIT = "quit"
    CANCEL = "cancel"
    DOWN = "down"
    UP = "up"
    SELECT = "select"


@dataclass
class NavigationState:
    """Screen, selection and scroll position for one run of the reader.

    Selection is clamped at both ends of the list rather than wrapping.
    """

    post_count: int
    screen: Screen = Screen.LIST
    selected_index: int = 0
    scroll_offset: int = 0
    quit_requested: bool = False

    def handle(self, nav_input: NavInput) -> bool:
        return apply_input(self, nav_input)


def apply_input(state: NavigationState, nav_input: NavInput) -> bool:
    """
    Apply one decoded input to ``state``.

    Returns False when the input means nothing on the current screen, so the
    caller can leave it to its default key handling.
    """
    if state.screen is Screen.LIST:
        return _apply_list_input(state, nav_input)
    return _apply_article_input(state, nav_input)


def _apply_list_input(state: NavigationState, nav_input: NavInput) -> bool:
    if nav_input is NavInput.QUIT:
        state.quit_requested = True
    elif nav_input is NavInput.DOWN:
        state.selected_index = max(min(state.selected_index + 1, state.post_count - 1), 0)
    elif nav_input is NavInput.UP:
        state.selected_index = max(state.selected_index - 1, 0)
    elif nav_input is NavInput.SELECT:
        state.screen = Screen.ARTICLE
        state.scroll_offset = 0
    else:
        return False
    return True


def _apply_article_input(state: NavigationState, nav_input: NavInput) -> bool:
    if nav_input in (NavInput.CANCEL, NavInput.QUIT):
        state.screen = Screen.LIST
        state.scroll_offset = 0
    elif nav_input is NavInput.DOWN:
        state.scroll_offset += 1
    elif nav_input is NavInput.UP:
        state.scroll_offset = max(state.scroll_offset - 1, 0)
    else:
        return False
    return True
