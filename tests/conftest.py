from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from unfurl_api.config import Settings
from unfurl_api.services.unfurl import UnfurlService

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def make_service(settings: Settings):
    """Return a factory building an UnfurlService backed by a fake site."""

    def factory(
        handler: Handler, **overrides
    ) -> tuple[UnfurlService, RecordingTransport]:
        transport = RecordingTransport(handler)
        service_settings = settings.model_copy(update=overrides) if overrides else settings
        service = UnfurlService(
            settings=service_settings,
            client_factory=lambda: httpx.AsyncClient(transport=transport),
        )
        return service, transport

    return factory


@pytest.fixture()
def serve_html(make_service):
    """Build a service whose every request is answered with ``html``."""

    def factory(html: str, **overrides):
        service, _ = make_service(lambda _: httpx.Response(200, html=html), **overrides)
        return service

    return factory
