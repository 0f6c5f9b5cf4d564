"""HTTP retrieval of pages to unfurl."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

import httpx

from unfurl_api.exceptions import NetworkError, RetrievalError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PageFetcher:
    """Fetch HTML documents while presenting as a desktop browser.

    A fresh ``httpx.AsyncClient`` is opened for every call unless
    ``client_factory`` is given, in which case the caller owns the client's
    lifetime.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: float | None = None
    debug_excerpt_length: int = 200
    log_excerpt_length: int = 500
    client_factory: Callable[[], httpx.AsyncClient] | None = None

    async def fetch(self, url: str) -> str:
        """Return the body of ``url``, raising on transport or HTTP failure."""
        manage_client = self.client_factory is None
        if self.client_factory is None:
            client = httpx.AsyncClient(follow_redirects=True)
        else:
            client = self.client_factory()
        try:
            response = await client.get(
                url, headers=dict(self.headers), timeout=self.timeout
            )
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Timed out fetching {url}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc
        finally:
            if manage_client:
                await client.aclose()

        body = response.text
        if not response.is_success:
            logger.warning(
                "Failed to fetch URL %s. Status: %s %s",
                url,
                response.status_code,
                response.reason_phrase,
            )
            logger.warning(
                "Response body (first %d chars): %s",
                self.log_excerpt_length,
                body[: self.log_excerpt_length],
            )
            raise RetrievalError(
                response.status_code,
                response.reason_phrase,
                body[: self.debug_excerpt_length],
            )
        return body
