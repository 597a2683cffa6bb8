from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


# --- Data models ---
@dataclass(frozen=True)
class Post:
    title: str
    subtitle: str = ""
    date: str = ""
    url: str = ""
    body_html: str = ""
    free: bool = False


class Screen(Enum):
    LIST = "list"
    ARTICLE = "article"
