import asyncio

import httpx
import pytest

from config.preview_config import PREVIEW_HEADERS
from services.fetch_service import (
    BrowserFetcher,
    FetchConnectionError,
    FetchStatusError,
    FetchTimeoutError,
    HttpFetcher,
    get_fetcher,
)


def make_fetcher(handler, timeout=10.0):
    return HttpFetcher(timeout=timeout, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_returns_html_and_sends_preview_headers():
    captured = {}

    def handler(request):
        captured["headers"] = request.headers
        return httpx.Response(200, html="<title>Hi</title>")

    page = await make_fetcher(handler).fetch("https://example.com/page")

    assert page.status == 200
    assert page.html == "<title>Hi</title>"
    assert page.url == "https://example.com/page"
    assert captured["headers"]["user-agent"] == PREVIEW_HEADERS["User-Agent"]
    assert captured["headers"]["accept"] == PREVIEW_HEADERS["Accept"]


@pytest.mark.asyncio
async def test_fetch_follows_redirects():
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/new"})
        return httpx.Response(200, text="moved")

    page = await make_fetcher(handler).fetch("https://example.com/old")
    assert page.url == "https://example.com/new"
    assert page.html == "moved"


@pytest.mark.asyncio
async def test_non_success_status_raises_status_error():
    fetcher = make_fetcher(lambda request: httpx.Response(404))

    with pytest.raises(FetchStatusError) as exc_info:
        await fetcher.fetch("https://example.com/missing")

    assert exc_info.value.status == 404
    assert exc_info.value.reason == "Not Found"


@pytest.mark.asyncio
async def test_connect_error_raises_connection_error():
    def handler(request):
        raise httpx.ConnectError("Name or service not known", request=request)

    with pytest.raises(FetchConnectionError):
        await make_fetcher(handler).fetch("https://no-such-host.invalid/")


@pytest.mark.asyncio
async def test_slow_response_raises_timeout_error():
    async def handler(request):
        await asyncio.sleep(5)
        return httpx.Response(200, text="too late")

    with pytest.raises(FetchTimeoutError):
        await make_fetcher(handler, timeout=0.05).fetch("https://example.com/slow")


@pytest.mark.asyncio
async def test_transport_timeout_raises_timeout_error():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(FetchTimeoutError):
        await make_fetcher(handler).fetch("https://example.com/slow")


def test_get_fetcher_selects_backend():
    assert isinstance(get_fetcher("http"), HttpFetcher)
    browser = get_fetcher("browser", timeout=3)
    assert isinstance(browser, BrowserFetcher)
    assert browser.timeout == 3


@pytest.mark.asyncio
async def test_url_rejected_by_client_raises_connection_error():
    def handler(request):
        raise AssertionError("request must not be sent")

    with pytest.raises(FetchConnectionError):
        await make_fetcher(handler).fetch("http://ex\x00ample.com")


@pytest.mark.asyncio
async def test_browser_fetch_bounded_by_one_deadline(monkeypatch):
    fetcher = BrowserFetcher(timeout=0.05)

    async def slow_render(url):
        await asyncio.sleep(5)

    monkeypatch.setattr(fetcher, "_render", slow_render)

    with pytest.raises(FetchTimeoutError):
        await fetcher.fetch("https://example.com")
