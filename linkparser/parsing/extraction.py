"""Finds links in comment and self-text bodies.

Recognizes absolute http(s) URLs, markdown link targets and bare
/r/$subreddit and /u/$user references, which Reddit auto-links.
"""

import logging
import re
from typing import Final

from linkparser.models.model_link import ParsedLink
from linkparser.parsing.url_parser import parse_url

logger = logging.getLogger(__name__)

# [text](target), target may be absolute or relative
MARKDOWN_LINK_PATTERN: Final = re.compile(r"\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")

ABSOLUTE_URL_PATTERN: Final = re.compile(r"https?://[^\s<>\"'\]\[)(]+", re.IGNORECASE)

# r/androiddev, /r/androiddev, /u/someuser. Not when part of a longer path or word.
REDDIT_REFERENCE_PATTERN: Final = re.compile(r"(?<![\w/.])/?([ru])/([a-zA-Z0-9_-]+)")

# Sentence punctuation that ends up glued to URLs in prose
TRAILING_PUNCTUATION: Final[str] = ".,;:!?'\""


def _clean(url: str) -> str:
    return url.rstrip(TRAILING_PUNCTUATION)


def extract_urls(text: str) -> list[str]:
    """Find all links in a block of text.

    Args:
        text: Comment body, self-text or message, raw markdown.

    Returns:
        Links in the order they first appear, without duplicates. Bare
        subreddit and user references are normalized to '/r/$name' and
        '/u/$name'.
    """
    found: list[tuple[int, str]] = []
    consumed: list[tuple[int, int]] = []

    for match in MARKDOWN_LINK_PATTERN.finditer(text):
        found.append((match.start(), _clean(match.group(1))))
        consumed.append(match.span())

    def _is_consumed(position: int) -> bool:
        return any(start <= position < end for start, end in consumed)

    for match in ABSOLUTE_URL_PATTERN.finditer(text):
        if _is_consumed(match.start()):
            continue
        found.append((match.start(), _clean(match.group(0))))
        consumed.append(match.span())

    for match in REDDIT_REFERENCE_PATTERN.finditer(text):
        if _is_consumed(match.start()):
            continue
        found.append((match.start(), f"/{match.group(1)}/{match.group(2)}"))

    urls: list[str] = []
    seen: set[str] = set()
    for _, url in sorted(found, key=lambda item: item[0]):
        if url and url not in seen:
            seen.add(url)
            urls.append(url)

    logger.debug(f"Extracted {len(urls)} links from {len(text)} characters of text")
    return urls


def parse_text(text: str) -> list[ParsedLink]:
    """Extract and parse every link in a block of text."""
    return [parse_url(url) for url in extract_urls(text)]
