from __future__ import annotations

import logging
from typing import List, Optional

import requests

from .config import HTTP_TIMEOUT, REQUEST_HEADERS
from .datamodels import Post
from .errors import HttpStatusError, TransportError
from .normalizer import parse_posts

logger = logging.getLogger("substack")

POSTS_ENDPOINT = "/api/v1/posts"


class PostFetcher:
    """Retrieve the newest posts of one publication in a single request."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update(REQUEST_HEADERS)
        return s

    def posts_url(self, limit: int) -> str:
        return f"{self.base_url}{POSTS_ENDPOINT}?limit={limit}&offset=0&sort=new"

    def fetch(self, limit: int, timeout: int = HTTP_TIMEOUT) -> List[Post]:
        """
        Fetch up to ``limit`` posts.

        Raises TransportError when the request cannot be completed and
        HttpStatusError when the API answers with a non-2xx status.
        """
        url = self.posts_url(limit)
        logger.debug("Fetching %s", url)
        try:
            resp = self.session.get(url, timeout=timeout)
        except requests.RequestException as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            raise TransportError(str(e)) from e

        if not 200 <= resp.status_code < 300:
            logger.warning("Fetch of %s returned HTTP %d", url, resp.status_code)
            raise HttpStatusError(resp.status_code)

        logger.debug("Fetched %s OK (%d bytes)", url, len(resp.content))
        return parse_posts(resp.content, self.base_url)


def fetch_posts(base_url: str, limit: int) -> List[Post]:
    return PostFetcher(base_url).fetch(limit)
