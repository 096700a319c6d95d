import re
from urllib.parse import SplitResult, urlsplit

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

# Leading/trailing C0 controls and spaces are dropped, as browsers do
_EDGE_CHARS = "".join(chr(c) for c in range(0x21))
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def parse_url(url: str) -> SplitResult:
    """
    Parse an absolute URL, raising ValueError when it has no scheme or host,
    contains control characters, has whitespace in the host, or carries a
    port that is not a number in 0-65535.
    """
    cleaned = url.strip(_EDGE_CHARS)
    if _CONTROL_CHARS.search(cleaned):
        raise ValueError(f"Control character in URL: {url!r}")
    parsed = urlsplit(cleaned)
    if not parsed.scheme or not parsed.hostname:
        raise ValueError(f"Not an absolute URL: {url!r}")
    if any(c.isspace() for c in parsed.netloc):
        raise ValueError(f"Whitespace in host: {url!r}")
    # Accessing .port validates it
    parsed.port
    return parsed


def get_protocol(parsed: SplitResult) -> str:
    return f"{parsed.scheme.lower()}:"


def get_host(parsed: SplitResult) -> str:
    """hostname[:port] without credentials, default ports dropped"""
    hostname = parsed.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    port = parsed.port
    if port is not None and DEFAULT_PORTS.get(parsed.scheme.lower()) != port:
        return f"{hostname}:{port}"
    return hostname


def get_origin(parsed: SplitResult) -> str:
    return f"{get_protocol(parsed)}//{get_host(parsed)}"


def resolve_url(url: str, base: SplitResult) -> str:
    try:
        if url.startswith("http://") or url.startswith("https://"):
            return url
        if url.startswith("//"):
            return f"{get_protocol(base)}{url}"
        if url.startswith("/"):
            return f"{get_origin(base)}{url}"
        return f"{get_origin(base)}/{url}"
    except ValueError:
        return url


def default_favicon(base: SplitResult) -> str:
    return f"{get_origin(base)}/favicon.ico"
