from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

# --- Configuration ---
DEFAULT_BASE_URL = "https://www.the-main-thread.com"
DEFAULT_POST_LIMIT = 25
DEFAULT_TITLE = "The Main Thread — Substack Reader"
HTTP_TIMEOUT = 15
WORDS_PER_MINUTE = 200

CONFIG_PATH = os.path.expanduser("~/.config/substack-tui/config.json")

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 substack-tui/1.0",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "limit": DEFAULT_POST_LIMIT,
    "theme": "textual-dark",
    "title": DEFAULT_TITLE,
}

# --- Logging ---
logger = logging.getLogger("substack")


def setup_logging(debug: bool = False) -> Optional[str]:
    """Configure logging."""
    if not debug:
        logging.basicConfig(level=logging.CRITICAL, handlers=[logging.NullHandler()])
        return None

    ts = datetime.now().strftime("%Y%m%dT%H%M%S")
    pid = os.getpid()
    debug_path = f"/tmp/substack_debug_{ts}_{pid}.log"

    # The terminal belongs to the UI, so debug output goes to a file
    logging.basicConfig(
        level=logging.DEBUG,
        filename=debug_path,
        filemode="a",
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    logger.debug("Debug logging enabled to %s", debug_path)
    return debug_path


def load_config(path: str = CONFIG_PATH) -> Dict[str, Any]:
    """Load the configuration file, falling back to defaults."""
    config = dict(DEFAULT_CONFIG)
    if not os.path.exists(path):
        logger.debug("No config file at %s, using defaults.", path)
        return config
    try:
        with open(path, "r") as f:
            user_config = json.load(f)
    except (IOError, json.JSONDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        return config

    if not isinstance(user_config, dict):
        logger.error("Ignoring config at %s: expected a JSON object", path)
        return config

    config.update(user_config)
    logger.info("Loaded config from %s", path)
    return config
