import logging
import re
from typing import Optional
from urllib.parse import SplitResult

from bs4 import BeautifulSoup

from config.preview_config import SOUP_EXTRACTOR
from models.schemas import PageMetadata
from utils.url_utils import default_favicon, resolve_url

logger = logging.getLogger(__name__)


def _meta_pattern(attr: str, value: str) -> re.Pattern:
    return re.compile(
        rf"""<meta[^>]*{attr}=["']{re.escape(value)}["'][^>]*content=["']([^"']+)["'][^>]*>""",
        re.IGNORECASE,
    )


class RegexMetadataExtractor:
    """
    Lenient pattern matching over raw HTML. Later patterns override earlier
    ones, so Open Graph values win over the plain tags.
    """

    TITLE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
    OG_TITLE = _meta_pattern("property", "og:title")
    DESCRIPTION = _meta_pattern("name", "description")
    OG_DESCRIPTION = _meta_pattern("property", "og:description")
    OG_IMAGE = _meta_pattern("property", "og:image")
    FAVICON = re.compile(
        r"""<link[^>]*rel=["'][^"']*icon[^"']*["'][^>]*href=["']([^"']+)["'][^>]*>""",
        re.IGNORECASE,
    )

    @staticmethod
    def _first(pattern: re.Pattern, html: str) -> Optional[str]:
        match = pattern.search(html)
        return match.group(1).strip() if match else None

    def extract(self, html: str, base_url: SplitResult) -> PageMetadata:
        metadata = PageMetadata()

        for pattern in (self.TITLE, self.OG_TITLE):
            value = self._first(pattern, html)
            if value is not None:
                metadata.title = value

        for pattern in (self.DESCRIPTION, self.OG_DESCRIPTION):
            value = self._first(pattern, html)
            if value is not None:
                metadata.description = value

        image = self._first(self.OG_IMAGE, html)
        if image is not None:
            metadata.image = resolve_url(image, base_url)

        favicon = self._first(self.FAVICON, html)
        if favicon is not None:
            metadata.favicon = resolve_url(favicon, base_url)
        else:
            metadata.favicon = default_favicon(base_url)

        return metadata


class SoupMetadataExtractor:
    """Same precedence as RegexMetadataExtractor, backed by an HTML parser"""

    @staticmethod
    def _meta_content(soup: BeautifulSoup, attr: str, value: str) -> Optional[str]:
        element = soup.find(
            "meta",
            attrs={attr: lambda v: v is not None and v.strip().lower() == value, "content": True},
        )
        if element:
            content = element.get("content", "").strip()
            return content or None
        return None

    @staticmethod
    def _icon_href(soup: BeautifulSoup) -> Optional[str]:
        for link in soup.find_all("link", href=True):
            rel = link.get("rel") or []
            if isinstance(rel, str):
                rel = [rel]
            if any("icon" in r.lower() for r in rel):
                href = link["href"].strip()
                if href:
                    return href
        return None

    def extract(self, html: str, base_url: SplitResult) -> PageMetadata:
        soup = BeautifulSoup(html, "html.parser")
        metadata = PageMetadata()

        if soup.title and soup.title.string and soup.title.string.strip():
            metadata.title = soup.title.string.strip()
        og_title = self._meta_content(soup, "property", "og:title")
        if og_title:
            metadata.title = og_title

        description = self._meta_content(soup, "name", "description")
        if description:
            metadata.description = description
        og_description = self._meta_content(soup, "property", "og:description")
        if og_description:
            metadata.description = og_description

        image = self._meta_content(soup, "property", "og:image")
        if image:
            metadata.image = resolve_url(image, base_url)

        favicon = self._icon_href(soup)
        metadata.favicon = resolve_url(favicon, base_url) if favicon else default_favicon(base_url)

        return metadata


def get_extractor(backend: str):
    if backend == SOUP_EXTRACTOR:
        return SoupMetadataExtractor()
    return RegexMetadataExtractor()
