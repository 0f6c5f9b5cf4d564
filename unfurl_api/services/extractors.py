"""Ordered fallback extractors over a parsed HTML document.

Each extractor takes the parsed document and returns a string or ``None``.
:func:`first_of` runs a chain of them and keeps the first non-empty answer,
which is how every preview field is built.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

Extractor = Callable[[BeautifulSoup], str | None]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_html(html: str) -> BeautifulSoup:
    # rel="shortcut icon" has to stay one string for exact selector matches
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def first_of(soup: BeautifulSoup, extractors: Iterable[Extractor]) -> str | None:
    for extractor in extractors:
        value = extractor(soup)
        if value:
            return value
    return None


def _attr(soup: BeautifulSoup, selector: str, attr: str) -> str | None:
    element = soup.select_one(selector)
    if element is None:
        return None
    return element.get(attr)


def meta_property(prop: str, *, strip: bool = False) -> Extractor:
    """Read ``content`` from the first ``<meta property=...>`` (Open Graph)."""

    def extract(soup: BeautifulSoup) -> str | None:
        value = _attr(soup, f'meta[property="{prop}"]', "content")
        return value.strip() if strip and value is not None else value

    return extract


def meta_name(name: str, *, strip: bool = False) -> Extractor:
    """Read ``content`` from the first ``<meta name=...>``."""

    def extract(soup: BeautifulSoup) -> str | None:
        value = _attr(soup, f'meta[name="{name}"]', "content")
        return value.strip() if strip and value is not None else value

    return extract


def link_href(rel: str) -> Extractor:
    """Read ``href`` from the first ``<link>`` whose rel is exactly ``rel``."""

    def extract(soup: BeautifulSoup) -> str | None:
        return _attr(soup, f'link[rel="{rel}"]', "href")

    return extract


def title_text(soup: BeautifulSoup) -> str | None:
    """Join the text of every <title>, inline SVG titles included."""
    elements = soup.find_all("title")
    if not elements:
        return None
    return "".join(element.get_text() for element in elements).strip()


def literal(value: str) -> Extractor:
    return lambda _soup: value


def _leading_int(value: str | None) -> int:
    if not value:
        return 0
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def content_image(min_width: int = 100, icon_marker: str = "icon") -> Extractor:
    """Pick the first inline image that looks like content rather than chrome.

    An ``<img>`` qualifies when its ``width`` attribute exceeds ``min_width``
    or its ``src`` does not mention ``icon_marker``.
    """

    def extract(soup: BeautifulSoup) -> str | None:
        for img in soup.find_all("img"):
            src = img.get("src")
            if not src:
                continue
            if _leading_int(img.get("width")) > min_width or icon_marker not in src:
                return src
        return None

    return extract


def origin_of(url: str) -> str | None:
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return f"{parts.scheme}://{parts.netloc}"


def resolve_url(href: str, base: str) -> str | None:
    """Make ``href`` absolute against ``base``; ``None`` if that is impossible."""
    if href.startswith("http"):
        return href
    if origin_of(base) is None:
        return None
    try:
        return urljoin(base, href)
    except ValueError:
        return None


def hostname_of(url: str) -> str | None:
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None
