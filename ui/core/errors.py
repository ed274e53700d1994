"""Errors raised by page fetchers."""

from typing import Optional


class FetchError(Exception):
    """A page could not be fetched. ``message`` is shown to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(FetchError):
    """Transport failure or timeout."""


class DecodeError(FetchError):
    """The response body was not a valid product page."""


class ServerError(FetchError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"Server returned HTTP {status_code}")
        self.status_code = status_code
