from __future__ import annotations


class FetchError(Exception):
    """Raised when the post list cannot be retrieved from the API."""


class TransportError(FetchError):
    """Raised on network, DNS or connection failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class HttpStatusError(FetchError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code} from Substack API")
        self.status_code = status_code


class EmptyResultError(Exception):
    """Raised when a fetch succeeded but produced no posts."""
