"""Error taxonomy for link unfurling.

Every failure raised by :class:`~unfurl_api.services.unfurl.UnfurlService`
derives from :class:`UnfurlError`, so callers can catch one base class while
still telling a bad request apart from an upstream or transport failure.
"""

from __future__ import annotations


class UnfurlError(Exception):
    """Raised when a page was fetched but could not be turned into a preview."""


class ValidationError(UnfurlError):
    """Raised when required input is missing. No request is made."""


class RetrievalError(UnfurlError):
    """Raised when the remote server answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, debug_info: str = "") -> None:
        super().__init__(f"Failed to fetch URL: {reason}")
        self.status_code = status_code
        self.reason = reason
        self.debug_info = debug_info


class NetworkError(UnfurlError):
    """Raised when no response was received (DNS, refused connection, timeout)."""
