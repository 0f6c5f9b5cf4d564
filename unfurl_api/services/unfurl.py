from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from unfurl_api.config import Settings, get_settings
from unfurl_api.exceptions import UnfurlError, ValidationError
from unfurl_api.schemas import UnfurlResult
from unfurl_api.services.extractors import (
    content_image,
    first_of,
    hostname_of,
    link_href,
    literal,
    meta_name,
    meta_property,
    origin_of,
    parse_html,
    resolve_url,
    title_text,
)
from unfurl_api.services.fetcher import PageFetcher

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "No Title"
DEFAULT_DESCRIPTION = "No description available."
FAVICON_RELS = ("icon", "shortcut icon", "apple-touch-icon")


def truncate(text: str, limit: int) -> str:
    """Cap ``text`` at ``limit`` characters, ending in an ellipsis when cut."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


class UnfurlService:
    """Fetch a page and derive a link preview from its metadata."""

    def __init__(
        self,
        settings: Settings | None = None,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.fetcher = PageFetcher(
            headers=self.settings.request_headers,
            timeout=self.settings.fetch_timeout,
            debug_excerpt_length=self.settings.debug_excerpt_length,
            log_excerpt_length=self.settings.log_excerpt_length,
            client_factory=client_factory,
        )

    async def unfurl(self, url: str | None) -> UnfurlResult:
        if not url:
            raise ValidationError("URL parameter is required.")

        try:
            html = await self.fetcher.fetch(url)
            return self.extract(html, url)
        except UnfurlError:
            raise
        except Exception as exc:
            logger.exception("Error unfurling URL %s", url)
            raise UnfurlError(str(exc) or "Unknown error") from exc

    def extract(self, html: str, url: str) -> UnfurlResult:
        """Build the preview for ``html`` that was served at ``url``."""
        soup = parse_html(html)
        cfg = self.settings

        title = first_of(
            soup,
            [meta_property("og:title", strip=True), title_text, literal(DEFAULT_TITLE)],
        )
        description = first_of(
            soup,
            [
                meta_property("og:description", strip=True),
                meta_name("description", strip=True),
                literal(DEFAULT_DESCRIPTION),
            ],
        )

        image_url = meta_property("og:image")(soup)
        if not image_url:
            image_url = content_image(cfg.min_image_width, cfg.icon_marker)(soup)
            if image_url:
                origin = origin_of(url)
                image_url = resolve_url(image_url, origin) if origin else None

        favicon_url = first_of(soup, [link_href(rel) for rel in FAVICON_RELS])
        if favicon_url:
            favicon_url = resolve_url(favicon_url, url) or favicon_url

        canonical_url = first_of(
            soup,
            [meta_property("og:url"), link_href("canonical"), literal(url)],
        )
        site_name = meta_property("og:site_name")(soup) or hostname_of(url) or url

        return UnfurlResult(
            title=truncate(title, cfg.max_title_length),
            description=truncate(description, cfg.max_description_length),
            image_url=image_url or None,
            url=canonical_url,
            site_name=site_name,
            favicon_url=favicon_url or None,
        )
