"""URL parsing: classifies links into ParsedLink variants."""

from linkparser.parsing.extraction import extract_urls, parse_text
from linkparser.parsing.html_text import unescape_html_url
from linkparser.parsing.url_parser import RULES, LinkRule, parse_post, parse_url, parse_urls
from linkparser.parsing.url_parts import UrlParts, split_url

__all__ = [
    # Parser
    "LinkRule",
    "RULES",
    "parse_post",
    "parse_url",
    "parse_urls",
    # Extraction
    "extract_urls",
    "parse_text",
    # Helpers
    "UrlParts",
    "split_url",
    "unescape_html_url",
]
