from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from substack_tui.config import HTTP_TIMEOUT, REQUEST_HEADERS
from substack_tui.errors import FetchError, HttpStatusError, TransportError
from substack_tui.fetcher import PostFetcher, fetch_posts


def _response(status_code=200, body=b""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = body
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def fetcher(session):
    return PostFetcher("https://example.com/", session=session)


def test_default_session_sends_identifying_header():
    fetcher = PostFetcher("https://example.com")
    assert fetcher.session.headers["User-Agent"] == REQUEST_HEADERS["User-Agent"]


def test_posts_url(fetcher):
    assert fetcher.posts_url(25) == "https://example.com/api/v1/posts?limit=25&offset=0&sort=new"


def test_fetch_parses_posts(fetcher, session):
    body = json.dumps({"posts": [{"title": "One", "slug": "one"}, {"title": ""}]}).encode()
    session.get.return_value = _response(200, body)

    posts = fetcher.fetch(10)

    session.get.assert_called_once_with(
        "https://example.com/api/v1/posts?limit=10&offset=0&sort=new", timeout=HTTP_TIMEOUT
    )
    assert len(posts) == 1
    assert posts[0].url == "https://example.com/p/one"


def test_fetch_http_error(fetcher, session):
    session.get.return_value = _response(404, b"not found")
    with pytest.raises(HttpStatusError) as excinfo:
        fetcher.fetch(10)
    assert excinfo.value.status_code == 404
    assert isinstance(excinfo.value, FetchError)


def test_fetch_accepts_any_2xx(fetcher, session):
    session.get.return_value = _response(203, b"[]")
    assert fetcher.fetch(10) == []


def test_fetch_transport_error(fetcher, session):
    session.get.side_effect = requests.ConnectionError("name resolution failed")
    with pytest.raises(TransportError) as excinfo:
        fetcher.fetch(10)
    assert "name resolution failed" in excinfo.value.message
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_fetch_timeout_is_transport_error(fetcher, session):
    session.get.side_effect = requests.Timeout("read timed out")
    with pytest.raises(TransportError):
        fetcher.fetch(10)


def test_fetch_empty_posts_is_empty_list(fetcher, session):
    session.get.return_value = _response(200, b'{"posts": []}')
    assert fetcher.fetch(10) == []


def test_fetch_posts_uses_post_fetcher():
    with patch("substack_tui.fetcher.PostFetcher.fetch") as mock_fetch:
        mock_fetch.return_value = []
        assert fetch_posts("https://example.com", 5) == []
        mock_fetch.assert_called_once_with(5)
