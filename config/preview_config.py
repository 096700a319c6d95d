import logging
import os
from dataclasses import dataclass
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

HTTP_BACKEND = "http"
BROWSER_BACKEND = "browser"
REGEX_EXTRACTOR = "regex"
SOUP_EXTRACTOR = "soup"

FETCH_BACKENDS = (HTTP_BACKEND, BROWSER_BACKEND)
EXTRACTOR_BACKENDS = (REGEX_EXTRACTOR, SOUP_EXTRACTOR)

DEFAULT_FETCH_TIMEOUT = 10.0

PREVIEW_HEADERS: Dict[str, str] = {
    "User-Agent": "Mozilla/5.0 (compatible; LinkPreview/1.0)",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

WORDS_PER_MINUTE = 200


@dataclass
class PreviewSettings:
    log_level: str = "INFO"
    fetch_backend: str = HTTP_BACKEND
    extractor_backend: str = REGEX_EXTRACTOR
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT

    @classmethod
    def from_env(cls) -> "PreviewSettings":
        fetch_backend = os.getenv("FETCH_BACKEND", HTTP_BACKEND).strip().lower()
        if fetch_backend not in FETCH_BACKENDS:
            logger.warning(f"Unknown FETCH_BACKEND '{fetch_backend}', using '{HTTP_BACKEND}'")
            fetch_backend = HTTP_BACKEND

        extractor_backend = os.getenv("EXTRACTOR_BACKEND", REGEX_EXTRACTOR).strip().lower()
        if extractor_backend not in EXTRACTOR_BACKENDS:
            logger.warning(f"Unknown EXTRACTOR_BACKEND '{extractor_backend}', using '{REGEX_EXTRACTOR}'")
            extractor_backend = REGEX_EXTRACTOR

        raw_timeout = os.getenv("FETCH_TIMEOUT_SECONDS")
        fetch_timeout = DEFAULT_FETCH_TIMEOUT
        if raw_timeout:
            try:
                fetch_timeout = float(raw_timeout)
            except ValueError:
                logger.warning(f"Invalid FETCH_TIMEOUT_SECONDS '{raw_timeout}', using {DEFAULT_FETCH_TIMEOUT}")
            else:
                if fetch_timeout <= 0:
                    logger.warning(f"FETCH_TIMEOUT_SECONDS must be positive, using {DEFAULT_FETCH_TIMEOUT}")
                    fetch_timeout = DEFAULT_FETCH_TIMEOUT

        log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning(f"Unknown LOG_LEVEL '{log_level}', using 'INFO'")
            log_level = "INFO"

        return cls(
            log_level=log_level,
            fetch_backend=fetch_backend,
            extractor_backend=extractor_backend,
            fetch_timeout=fetch_timeout,
        )


settings = PreviewSettings.from_env()
