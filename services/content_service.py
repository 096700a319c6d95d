import math
import re
from typing import Tuple

from bs4 import BeautifulSoup

from config.preview_config import WORDS_PER_MINUTE


class ContentService:
    """Helpers for stored rich text (blog posts, IPO descriptions)"""

    @staticmethod
    def plain_text(html: str) -> str:
        if not html:
            return ""
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup(["script", "style"]):
            tag.decompose()
        return soup.get_text(" ")

    @staticmethod
    def count_words(html: str) -> int:
        return len(ContentService.plain_text(html).split())

    @staticmethod
    def estimate_read_time(html: str, words_per_minute: int = WORDS_PER_MINUTE) -> Tuple[int, int]:
        """Returns (words, minutes); anything short still reads as one minute."""
        if words_per_minute <= 0:
            raise ValueError("words_per_minute must be positive")
        words = ContentService.count_words(html)
        return words, max(1, math.ceil(words / words_per_minute))

    @staticmethod
    def create_slug(text: str) -> str:
        slug = re.sub(r"[^a-z0-9\s-]", "", text.lower())
        slug = re.sub(r"\s+", "-", slug)
        return re.sub(r"-+", "-", slug)

    @staticmethod
    def truncate_words(text: str, max_words: int) -> Tuple[str, bool]:
        if not text:
            return "", False
        words = text.strip().split()
        if len(words) > max_words:
            return " ".join(words[:max_words]) + "…", True
        return text, False
