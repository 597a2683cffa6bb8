from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from .datamodels import Post

logger = logging.getLogger("substack")

FREE_AUDIENCE = "everyone"
DATE_LENGTH = 10


def parse_posts(payload: Union[bytes, str], base_url: str) -> List[Post]:
    """
    Convert an API payload into a list of posts.

    The payload may be a bare JSON array of post objects or an object with a
    ``posts`` array. Malformed payloads yield an empty list and malformed
    records are skipped; nothing here raises on bad content.
    """
    try:
        root = json.loads(payload)
    except (ValueError, TypeError) as e:
        logger.debug("Failed to decode posts payload: %s", e)
        return []

    records = _find_records(root)
    if records is None:
        logger.debug("Posts payload has an unexpected shape: %s", type(root).__name__)
        return []

    posts: List[Post] = []
    for record in records:
        post = _to_post(record, base_url)
        if post is not None:
            posts.append(post)
    logger.debug("Parsed %d posts from %d records", len(posts), len(records))
    return posts


def _find_records(root: Any) -> Optional[List[Any]]:
    if isinstance(root, list):
        return root
    if isinstance(root, dict) and isinstance(root.get("posts"), list):
        return root["posts"]
    return None


def _get_str(record: Dict[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _to_post(record: Any, base_url: str) -> Optional[Post]:
    if not isinstance(record, dict):
        return None

    title = _get_str(record, "title")
    if title is None or not title.strip():
        return None

    subtitle = _get_str(record, "subtitle")
    post_date = _get_str(record, "post_date")
    slug = _get_str(record, "slug")
    body = _get_str(record, "body_html")
    audience = _get_str(record, "audience")

    date = post_date[:DATE_LENGTH] if post_date and len(post_date) >= DATE_LENGTH else ""
    return Post(
        title=title,
        subtitle=subtitle or "",
        date=date,
        url=f"{base_url}/p/{slug or ''}",
        body_html=body or "",
        free=audience == FREE_AUDIENCE,
    )
