"""HTML entity decoding for URLs that arrive HTML-escaped.

Only applied to hosts known to escape their URLs, never to URLs in general.
"""

import html


def unescape_html_url(url: str) -> str:
    """Decode HTML entities in a URL.

    >>> unescape_html_url("https://i.reddituploads.com/abc?fit=max&amp;h=1536")
    'https://i.reddituploads.com/abc?fit=max&h=1536'
    """
    return html.unescape(url).strip()
