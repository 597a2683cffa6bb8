#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from .app import SubstackApp
from .config import DEFAULT_BASE_URL, DEFAULT_POST_LIMIT, load_config, setup_logging
from .datamodels import Post
from .errors import EmptyResultError, FetchError
from .fetcher import fetch_posts

logger = logging.getLogger("substack")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Substack TUI Reader")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--base-url", type=str, help="Publication URL, e.g. https://example.substack.com")
    parser.add_argument("--limit", type=int, help="Number of posts to fetch")
    parser.add_argument("--theme", type=str, help="Textual theme for this run")
    return parser


def load_posts(base_url: str, limit: int) -> List[Post]:
    """Fetch posts, treating an empty result as an error."""
    posts = fetch_posts(base_url, limit)
    if not posts:
        raise EmptyResultError(base_url)
    return posts


def resolve_options(
    args: argparse.Namespace, config: Dict[str, Any]
) -> Tuple[str, int, Optional[str]]:
    """Pick base URL, limit and theme from flags, then config, then defaults."""
    base_url = args.base_url if args.base_url is not None else config.get("base_url")
    if not isinstance(base_url, str) or not base_url.strip():
        logger.warning("Invalid base_url %r, using %s", base_url, DEFAULT_BASE_URL)
        base_url = DEFAULT_BASE_URL

    limit = args.limit if args.limit is not None else config.get("limit")
    # bool is an int subclass
    if isinstance(limit, bool) or not isinstance(limit, int):
        logger.warning("Invalid limit %r, using %d", limit, DEFAULT_POST_LIMIT)
        limit = DEFAULT_POST_LIMIT

    theme_name = args.theme if args.theme is not None else config.get("theme")
    if not isinstance(theme_name, str):
        theme_name = None
    return base_url, limit, theme_name


# --- Entrypoint ---
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    config = load_config()
    base_url, limit, theme_name = resolve_options(args, config)

    print(f"Fetching articles from {base_url}...")
    try:
        posts = load_posts(base_url, limit)
    except FetchError as e:
        logger.error("Failed to fetch posts from %s: %s", base_url, e)
        print(f"Failed to fetch posts: {e}", file=sys.stderr)
        return 1
    except EmptyResultError:
        logger.error("No posts found at %s", base_url)
        print("No posts found.", file=sys.stderr)
        return 1

    logger.info("Loaded %d posts from %s", len(posts), base_url)
    try:
        app = SubstackApp(posts, title=config.get("title"), theme=theme_name)
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
