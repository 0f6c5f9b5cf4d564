from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from unfurl_api.api.deps import get_unfurl_service
from unfurl_api.main import app
from unfurl_api.services.unfurl import UnfurlService


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def upstream(make_service):
    """Route the unfurl endpoint at a fake upstream answering with ``handler``."""

    def install(handler):
        service, transport = make_service(handler)
        app.dependency_overrides[get_unfurl_service] = lambda: service
        return transport

    return install


def test_healthcheck(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "Unfurl API"}


def test_missing_url_returns_400_without_fetching(client, upstream) -> None:
    transport = upstream(lambda _: httpx.Response(200, html="<html></html>"))

    response = client.get("/unfurl")

    assert response.status_code == 400
    assert response.json() == {"error": "URL parameter is required."}
    assert transport.requests == []


def test_unfurl_returns_preview_with_null_fields(client, upstream) -> None:
    upstream(
        lambda _: httpx.Response(
            200, html="<html><head><title>Deck stain colours</title></head></html>"
        )
    )

    response = client.get("/unfurl", params={"url": "https://sub.example.com/page"})

    assert response.status_code == 200
    assert response.json() == {
        "title": "Deck stain colours",
        "description": "No description available.",
        "imageUrl": None,
        "url": "https://sub.example.com/page",
        "siteName": "sub.example.com",
        "faviconUrl": None,
    }


def test_upstream_status_is_propagated(client, upstream) -> None:
    upstream(lambda _: httpx.Response(404, text="<h1>Missing</h1>" + "." * 400))

    response = client.get("/unfurl", params={"url": "https://example.com/article"})

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "Failed to fetch URL: Not Found"
    assert body["debugInfo"].startswith("<h1>Missing</h1>")
    assert len(body["debugInfo"]) == 200


def test_network_failure_returns_500(client, upstream) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    upstream(refuse)

    response = client.get("/unfurl", params={"url": "https://down.example.com/"})

    assert response.status_code == 500
    assert response.json() == {"error": "Could not unfurl link: Connection refused"}


@pytest.mark.asyncio()
async def test_default_dependency_builds_fresh_services() -> None:
    first = await get_unfurl_service()
    second = await get_unfurl_service()

    assert isinstance(first, UnfurlService)
    assert first is not second


def test_malformed_host_returns_json_500(client, upstream) -> None:
    transport = upstream(lambda _: httpx.Response(200, html="<html></html>"))

    response = client.get("/unfurl", params={"url": "https://xn--/"})

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json()["error"].startswith("Could not unfurl link: ")
    assert transport.requests == []
