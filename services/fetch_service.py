import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx
from playwright.async_api import async_playwright, Error as PlaywrightError, TimeoutError as PlaywrightTimeout

from config.preview_config import (
    BROWSER_BACKEND,
    DEFAULT_FETCH_TIMEOUT,
    PREVIEW_HEADERS,
)

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Base class for a fetch that produced no usable page"""


class FetchTimeoutError(FetchError):
    pass


class FetchConnectionError(FetchError):
    pass


class FetchStatusError(FetchError):
    def __init__(self, status: int, reason: str = ""):
        super().__init__(f"HTTP {status} {reason}".strip())
        self.status = status
        self.reason = reason


@dataclass
class FetchedPage:
    url: str
    status: int
    html: str


class HttpFetcher:
    """Plain HTTP GET with a single deadline covering the whole exchange"""

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.headers = dict(headers or PREVIEW_HEADERS)
        self.transport = transport

    async def _get(self, url: str) -> FetchedPage:
        async with httpx.AsyncClient(
            headers=self.headers,
            follow_redirects=True,
            timeout=None,
            transport=self.transport,
        ) as client:
            response = await client.get(url)
            if not response.is_success:
                raise FetchStatusError(response.status_code, response.reason_phrase)
            return FetchedPage(url=str(response.url), status=response.status_code, html=response.text)

    async def fetch(self, url: str) -> FetchedPage:
        try:
            return await asyncio.wait_for(self._get(url), timeout=self.timeout)
        except FetchStatusError as e:
            logger.warning(f"Fetch of {url} returned {e.status} {e.reason}")
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"Fetch of {url} timed out after {self.timeout}s")
            raise FetchTimeoutError(f"Timed out after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Fetch of {url} failed: {e!r}")
            raise FetchConnectionError(str(e)) from e


class BrowserFetcher:
    """
    Fetch through headless Chromium so metadata injected by scripts is
    present in the returned HTML. Same failure classification as HttpFetcher.
    """

    LAUNCH_ARGS = [
        '--no-sandbox',
        '--disable-setuid-sandbox',
        '--disable-dev-shm-usage',
        '--disable-gpu',
        '--no-first-run',
        '--disable-extensions'
    ]

    def __init__(self, timeout: float = DEFAULT_FETCH_TIMEOUT, headers: Optional[Dict[str, str]] = None):
        self.timeout = timeout
        self.headers = dict(headers or PREVIEW_HEADERS)

    async def fetch(self, url: str) -> FetchedPage:
        # Launch, navigation and reading the DOM share one deadline
        try:
            return await asyncio.wait_for(self._render(url), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"Browser fetch of {url} timed out after {self.timeout}s")
            raise FetchTimeoutError(f"Timed out after {self.timeout}s") from e

    async def _render(self, url: str) -> FetchedPage:
        headers = dict(self.headers)
        user_agent = headers.pop("User-Agent", None)

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True, args=self.LAUNCH_ARGS)
            try:
                context = await browser.new_context(user_agent=user_agent, extra_http_headers=headers)
                page = await context.new_page()

                # Only the document is needed for metadata
                await page.route("**/*", lambda route, request: (
                    route.continue_() if request.resource_type in ['document', 'script', 'xhr', 'fetch']
                    else route.abort()
                ))

                try:
                    response = await page.goto(
                        url,
                        wait_until="domcontentloaded",
                        timeout=self.timeout * 1000
                    )
                except PlaywrightTimeout as e:
                    logger.warning(f"Browser fetch of {url} timed out after {self.timeout}s")
                    raise FetchTimeoutError(f"Timed out after {self.timeout}s") from e
                except PlaywrightError as e:
                    logger.warning(f"Browser fetch of {url} failed: {e}")
                    raise FetchConnectionError(str(e)) from e

                if response is None:
                    raise FetchConnectionError("No response")
                if not response.ok:
                    logger.warning(f"Browser fetch of {url} returned {response.status} {response.status_text}")
                    raise FetchStatusError(response.status, response.status_text)

                return FetchedPage(url=response.url, status=response.status, html=await page.content())
            finally:
                await browser.close()


def get_fetcher(backend: str, timeout: float = DEFAULT_FETCH_TIMEOUT):
    if backend == BROWSER_BACKEND:
        return BrowserFetcher(timeout=timeout)
    return HttpFetcher(timeout=timeout)
