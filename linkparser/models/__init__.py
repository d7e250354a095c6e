"""Pydantic models for linkparser."""

from linkparser.models.model_link import (
    PARSED_LINK_ADAPTER,
    CommentLink,
    ExternalLink,
    LinkKind,
    LinkType,
    MediaHost,
    MediaKind,
    MediaLink,
    ParsedLink,
    SubmissionLink,
    SubredditLink,
    UnsupportedLink,
    UserLink,
)
from linkparser.models.model_post import (
    PostHint,
    PostMetadata,
    PreviewImage,
    Thumbnails,
)

__all__ = [
    # Parsed links
    "ParsedLink",
    "PARSED_LINK_ADAPTER",
    "CommentLink",
    "ExternalLink",
    "MediaLink",
    "SubmissionLink",
    "SubredditLink",
    "UnsupportedLink",
    "UserLink",
    # Enums
    "LinkKind",
    "LinkType",
    "MediaHost",
    "MediaKind",
    # Post metadata
    "PostHint",
    "PostMetadata",
    "PreviewImage",
    "Thumbnails",
]
