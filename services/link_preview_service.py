import logging
from typing import Optional
from urllib.parse import SplitResult

from config.preview_config import settings
from models.schemas import LinkPreview
from services.fetch_service import (
    FetchConnectionError,
    FetchStatusError,
    FetchTimeoutError,
    get_fetcher,
)
from services.metadata_extractor import get_extractor
from utils.url_utils import parse_url

logger = logging.getLogger(__name__)

class LinkPreviewService:

    @staticmethod
    def validate_url(url: str) -> Optional[SplitResult]:
        try:
            return parse_url(url)
        except ValueError as e:
            logger.info(f"Rejected URL {url!r}: {e}")
            return None

    @staticmethod
    def failure(url: str, title: str, description: str) -> LinkPreview:
        return LinkPreview(url=url, valid=False, title=title, description=description)

    @staticmethod
    async def get_link_preview(url: str, fetcher=None, extractor=None) -> LinkPreview:
        """
        Resolve a URL into a preview. Every fetch failure is returned in-band
        as ``valid=False`` with a human readable title and description.
        """
        parsed = LinkPreviewService.validate_url(url)
        if parsed is None:
            return LinkPreviewService.failure(url, "Invalid URL", "The provided URL is not valid")

        fetcher = fetcher or get_fetcher(settings.fetch_backend, settings.fetch_timeout)
        extractor = extractor or get_extractor(settings.extractor_backend)

        logger.info(f"Fetching preview for URL: {url}")
        try:
            page = await fetcher.fetch(parsed.geturl())
        except FetchStatusError as e:
            return LinkPreviewService.failure(url, f"Error {e.status}", e.reason)
        except FetchTimeoutError:
            return LinkPreviewService.failure(url, "Request Timeout", "The request took too long to complete")
        except FetchConnectionError:
            return LinkPreviewService.failure(url, "Connection Error", "Unable to connect to the website")

        metadata = extractor.extract(page.html, parsed)
        preview = LinkPreview(url=url, valid=True, **metadata.model_dump(exclude_none=True))

        logger.info(f"Successfully generated preview for URL: {url}")
        logger.debug(f"Title: {preview.title}")
        logger.debug(f"Description: {preview.description}")
        logger.debug(f"Image: {preview.image}")

        return preview
