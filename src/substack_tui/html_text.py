from __future__ import annotations

import re
from enum import Enum
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Script, Stylesheet, Tag

UNAVAILABLE_MESSAGE = (
    "(No content — this article may be paywalled)\n\n"
    "Visit the article URL above to read it in your browser."
)

BLANK_LINES_PATTERN = re.compile(r"(\n\s*){3,}")


class NodeKind(Enum):
    TEXT = "text"
    HEADING = "heading"
    BLOCK = "block"
    LINE_BREAK = "line_break"
    PREFORMATTED = "preformatted"
    OTHER = "other"


TAG_KINDS: Dict[str, NodeKind] = {
    "h1": NodeKind.HEADING,
    "h2": NodeKind.HEADING,
    "h3": NodeKind.HEADING,
    "h4": NodeKind.HEADING,
    "h5": NodeKind.HEADING,
    "h6": NodeKind.HEADING,
    "p": NodeKind.BLOCK,
    "div": NodeKind.BLOCK,
    "li": NodeKind.BLOCK,
    "br": NodeKind.LINE_BREAK,
    "pre": NodeKind.PREFORMATTED,
}

# kind -> (emitted on enter, emitted on leave)
MARKERS: Dict[NodeKind, Tuple[str, str]] = {
    NodeKind.HEADING: ("\n\n## ", "\n"),
    NodeKind.BLOCK: ("\n", ""),
    NodeKind.LINE_BREAK: ("\n", ""),
    NodeKind.PREFORMATTED: ("\n```\n", "\n```\n"),
    NodeKind.OTHER: ("", ""),
}

# Comments, doctypes, CDATA and script/style bodies are strings in bs4 but not text
_NON_TEXT_STRINGS = (PreformattedString, Script, Stylesheet)


def node_kind(node: PageElement) -> Optional[NodeKind]:
    """Classify a parsed node; None means the node contributes nothing."""
    if isinstance(node, NavigableString):
        if isinstance(node, _NON_TEXT_STRINGS):
            return None
        return NodeKind.TEXT
    if isinstance(node, Tag):
        return TAG_KINDS.get(node.name, NodeKind.OTHER)
    return None


def _text_of(node: NavigableString) -> str:
    text = str(node)
    # A newline directly after <pre> is part of the tag, not the content
    parent = node.parent
    if (
        parent is not None
        and TAG_KINDS.get(parent.name) is NodeKind.PREFORMATTED
        and node.previous_sibling is None
        and text.startswith("\n")
    ):
        return text[1:]
    return text


def html_to_text(html: Optional[str]) -> str:
    """
    Convert an article body into plain text with light structure markers.

    Headings become ``## `` lines, paragraphs and line breaks become newlines
    and ``<pre>`` blocks are fenced with triple backticks. Runs of three or
    more blank lines collapse into one blank line. Lines are never wrapped.
    """
    if html is None or not html.strip():
        return UNAVAILABLE_MESSAGE

    body = BeautifulSoup(html, "lxml").body
    if body is None:
        return ""

    out: List[str] = []
    # (node, leaving) pairs; children pushed in reverse to keep document order
    stack: List[Tuple[PageElement, bool]] = [(child, False) for child in reversed(body.contents)]
    while stack:
        node, leaving = stack.pop()
        kind = node_kind(node)
        if kind is None:
            continue
        if kind is NodeKind.TEXT:
            out.append(_text_of(node))
            continue

        enter, leave = MARKERS[kind]
        if leaving:
            out.append(leave)
            continue
        out.append(enter)
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.contents))

    return BLANK_LINES_PATTERN.sub("\n\n", "".join(out)).strip()
