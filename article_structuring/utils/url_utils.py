"""URL helpers for labelling sources.

All helpers are pure and never raise: a malformed URL is reported through
`parse_hostname` returning ``None`` and every derived label degrades to a
fixed fallback.
"""

from __future__ import annotations

from urllib.parse import urlencode, urlparse

from article_structuring.core.config import Settings, settings as default_settings


def parse_hostname(url: str) -> str | None:
    """Extract the lowercase hostname of an absolute URL.

    Args:
        url: URL to parse

    Returns:
        Hostname (e.g. "www.reuters.com"), or None when the URL is not an
        absolute URL with a host

    Example:
        >>> parse_hostname("https://www.Reuters.com/world")
        "www.reuters.com"
        >>> parse_hostname("not a url") is None
        True
    """
    if not url or not url.strip():
        return None

    try:
        parsed = urlparse(url.strip())
    except ValueError:
        # e.g. unbalanced IPv6 brackets
        return None

    if not parsed.scheme or not parsed.hostname:
        return None

    return parsed.hostname


def strip_www(hostname: str) -> str:
    """Remove a leading ``www.`` label."""
    if hostname.startswith("www."):
        return hostname[4:]
    return hostname


def domain_name(url: str) -> str:
    """Short source label: hostname without ``www.``, up to the first dot.

    Examples:
        - "https://www.reuters.com/a" -> "reuters"
        - "https://techcrunch.com/other" -> "techcrunch"
        - "https://en.wikipedia.org/wiki/AI" -> "en"

    Args:
        url: Source URL

    Returns:
        Short label, or the URL verbatim when it cannot be parsed
    """
    hostname = parse_hostname(url)
    if hostname is None:
        return url

    return strip_www(hostname).split(".")[0]


def favicon_url(url: str, settings: Settings | None = None) -> str:
    """Favicon service URL for the source's hostname.

    Args:
        url: Source URL
        settings: Settings providing the favicon service and size

    Returns:
        Favicon URL, or "" when the URL is malformed
    """
    hostname = parse_hostname(url)
    if hostname is None:
        return ""

    cfg = settings or default_settings
    query = urlencode({"domain": hostname, "sz": cfg.FAVICON_SIZE})
    return f"{cfg.FAVICON_SERVICE_URL}?{query}"
