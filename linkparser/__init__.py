"""linkparser - identify what URLs found on Reddit point to."""

from linkparser.models import (
    PARSED_LINK_ADAPTER,
    CommentLink,
    ExternalLink,
    LinkKind,
    LinkType,
    MediaHost,
    MediaKind,
    MediaLink,
    ParsedLink,
    PostHint,
    PostMetadata,
    PreviewImage,
    SubmissionLink,
    SubredditLink,
    Thumbnails,
    UnsupportedLink,
    UserLink,
)
from linkparser.parsing import extract_urls, parse_post, parse_text, parse_url, parse_urls

__version__ = "0.1.0"

__all__ = [
    "parse_url",
    "parse_post",
    "parse_urls",
    "parse_text",
    "extract_urls",
    "ParsedLink",
    "PARSED_LINK_ADAPTER",
    "CommentLink",
    "ExternalLink",
    "MediaLink",
    "SubmissionLink",
    "SubredditLink",
    "UnsupportedLink",
    "UserLink",
    "LinkKind",
    "LinkType",
    "MediaHost",
    "MediaKind",
    "PostHint",
    "PostMetadata",
    "PreviewImage",
    "Thumbnails",
]
