from typing import Dict, Any
import logging

from config.preview_config import EXTRACTOR_BACKENDS, settings
from services.fetch_service import FetchError, FetchStatusError, get_fetcher
from services.metadata_extractor import get_extractor
from utils.url_utils import parse_url

logger = logging.getLogger(__name__)

class MetadataDebugService:

    @staticmethod
    async def get_fetch_outcome(url: str, backend: str = None, fetcher=None) -> Dict[str, Any]:
        """
        Fetch a URL and report what came back, without extracting anything

        Args:
            url: Target URL
            backend: Fetch backend name, defaults to the configured one
            fetcher: Explicit fetcher instance, overrides backend
        """
        backend = backend or settings.fetch_backend
        outcome = {
            'url': url,
            'backend': backend,
            'final_url': None,
            'status': None,
            'html_length': None,
            'head_html': None,
            'error': None,
            'error_type': None,
        }

        try:
            parsed = parse_url(url)
        except ValueError as e:
            outcome['error'] = str(e)
            outcome['error_type'] = 'InvalidURL'
            return outcome

        fetcher = fetcher or get_fetcher(backend, settings.fetch_timeout)
        try:
            page = await fetcher.fetch(parsed.geturl())
        except FetchStatusError as e:
            outcome['status'] = e.status
            outcome['error'] = str(e)
            outcome['error_type'] = type(e).__name__
            return outcome
        except FetchError as e:
            outcome['error'] = str(e)
            outcome['error_type'] = type(e).__name__
            return outcome

        outcome['final_url'] = page.url
        outcome['status'] = page.status
        outcome['html_length'] = len(page.html)

        lower = page.html.lower()
        head_end = lower.find('</head>')
        if head_end != -1:
            head_start = lower.find('<head')
            outcome['head_html'] = page.html[max(head_start, 0):head_end + len('</head>')]

        return outcome

    @staticmethod
    async def compare_extractors(url: str, fetcher=None) -> Dict[str, Any]:
        """Run every extraction backend over one fetched copy of the page"""
        parsed = parse_url(url)
        fetcher = fetcher or get_fetcher(settings.fetch_backend, settings.fetch_timeout)
        page = await fetcher.fetch(parsed.geturl())

        results = {}
        for backend in EXTRACTOR_BACKENDS:
            metadata = get_extractor(backend).extract(page.html, parsed)
            results[backend] = metadata.model_dump(exclude_none=True)

        fields = set()
        for extracted in results.values():
            fields.update(extracted)
        differences = sorted(
            field for field in fields
            if len({extracted.get(field) for extracted in results.values()}) > 1
        )

        logger.info(f"Compared extractors for {url}: {len(differences)} differing field(s)")

        return {
            'url': url,
            'final_url': page.url,
            'results': results,
            'differences': differences,
        }
