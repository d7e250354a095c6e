"""Total URL splitting.

`split_url` never raises: anything `urllib.parse` rejects is treated as a URL
with an empty domain and path, which the parser reports as an external link.
"""

import logging
from dataclasses import dataclass
from urllib.parse import parse_qs, unquote, urlsplit

from linkparser.consts import IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UrlParts:
    """The pieces of a URL the parser matches against."""

    url: str
    scheme: str
    domain: str  # Lowercased host, "" if absent
    path: str  # Percent-decoded path, "" if absent
    query: str


def split_url(url: str) -> UrlParts:
    """Split a URL into scheme, domain, decoded path and raw query.

    Args:
        url: Any string. Scheme-relative and path-only references are valid.

    Returns:
        UrlParts. Domain and path are empty strings when missing or when the
        URL can't be parsed.
    """
    try:
        parts = urlsplit(url.strip())
        domain = parts.hostname or ""
    except ValueError as e:
        logger.warning(f"Couldn't parse URL {url!r}: {e}")
        return UrlParts(url=url, scheme="", domain="", path="", query="")

    return UrlParts(
        url=url,
        scheme=parts.scheme,
        domain=domain,
        path=unquote(parts.path),
        query=parts.query,
    )


def query_int(query: str, name: str, default: int = 0) -> int:
    """Read a non-negative integer query parameter.

    Missing, empty, non-numeric and negative values all give `default`.
    """
    values = parse_qs(query).get(name)
    if not values:
        return default
    try:
        value = int(values[0])
    except ValueError:
        return default
    return value if value >= 0 else default


def is_image_path(path: str) -> bool:
    """Check if a URL path ends in a known image extension."""
    return path.lower().endswith(IMAGE_EXTENSIONS)
