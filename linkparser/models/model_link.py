"""Parsed link models.

`ParsedLink` is a closed union discriminated by the `kind` field. Exactly one
variant is produced for every parsed URL. All variants are immutable.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from linkparser.models.model_post import Thumbnails


# === Enums ===


class LinkKind(str, Enum):
    """Values of the `kind` discriminator of the `ParsedLink` union."""

    SUBMISSION = "submission"
    COMMENT = "comment"
    SUBREDDIT = "subreddit"
    USER = "user"
    UNSUPPORTED = "unsupported"
    MEDIA = "media"
    EXTERNAL = "external"


class LinkType(str, Enum):
    """Coarse rendering category of a link."""

    REDDIT_HOSTED = "reddit_hosted"
    IMAGE_OR_GIF = "image_or_gif"
    VIDEO = "video"
    EXTERNAL = "external"


class MediaKind(str, Enum):
    """How a direct media URL should be displayed."""

    IMAGE_OR_GIF = "image_or_gif"
    VIDEO = "video"


class MediaHost(str, Enum):
    """Which host rule produced a media link."""

    IMGUR = "imgur"
    GFYCAT = "gfycat"
    GIPHY = "giphy"
    REDDIT_UPLOADS = "reddit_uploads"
    GENERIC = "generic"


# === Reddit links ===


class _FrozenLink(BaseModel):
    model_config = ConfigDict(frozen=True)


class CommentLink(_FrozenLink):
    """A comment, optionally shown with some of its parent comments."""

    kind: Literal["comment"] = "comment"
    comment_id: str = Field(min_length=1)
    context_depth: int = Field(default=0, ge=0, description="Parent comments to include")

    @property
    def link_type(self) -> LinkType:
        return LinkType.REDDIT_HOSTED


class SubmissionLink(_FrozenLink):
    """A post, optionally opened at a specific comment."""

    kind: Literal["submission"] = "submission"
    url: str = Field(description="The URL this link was parsed from")
    submission_id: str
    subreddit_name: str | None = Field(
        default=None, description="Absent for short redd.it links"
    )
    initial_comment: CommentLink | None = None

    @property
    def link_type(self) -> LinkType:
        return LinkType.REDDIT_HOSTED


class SubredditLink(_FrozenLink):
    """A subreddit: /r/<name>."""

    kind: Literal["subreddit"] = "subreddit"
    name: str

    @property
    def link_type(self) -> LinkType:
        return LinkType.REDDIT_HOSTED


class UserLink(_FrozenLink):
    """A user profile: /u/<name>."""

    kind: Literal["user"] = "user"
    name: str

    @property
    def link_type(self) -> LinkType:
        return LinkType.REDDIT_HOSTED


class UnsupportedLink(_FrozenLink):
    """A Reddit feature that is recognized but not handled (live threads)."""

    kind: Literal["unsupported"] = "unsupported"
    url: str

    @property
    def link_type(self) -> LinkType:
        return LinkType.REDDIT_HOSTED


# === Other links ===


class MediaLink(_FrozenLink):
    """A URL that can be fetched and displayed directly.

    `host_supplied_direct` is True only when the URL is known to point at a
    ready-to-fetch image or video, as opposed to one guessed by the parser.
    Reddit's precomputed preview sizes are safe to use only in that case.
    """

    kind: Literal["media"] = "media"
    url: str
    host_supplied_direct: bool
    media_kind: MediaKind
    host: MediaHost = MediaHost.GENERIC
    preview_images: Thumbnails | None = None

    @property
    def link_type(self) -> LinkType:
        if self.media_kind == MediaKind.VIDEO:
            return LinkType.VIDEO
        return LinkType.IMAGE_OR_GIF

    def with_preview_images(self, thumbnails: Thumbnails | None) -> "MediaLink":
        """Return a copy carrying Reddit's preview images."""
        return self.model_copy(update={"preview_images": thumbnails})


class ExternalLink(_FrozenLink):
    """Any URL that isn't recognized."""

    kind: Literal["external"] = "external"
    url: str

    @property
    def link_type(self) -> LinkType:
        return LinkType.EXTERNAL


ParsedLink = Annotated[
    Union[
        SubmissionLink,
        CommentLink,
        SubredditLink,
        UserLink,
        UnsupportedLink,
        MediaLink,
        ExternalLink,
    ],
    Field(discriminator="kind"),
]

# Validates and serializes any ParsedLink variant
PARSED_LINK_ADAPTER: TypeAdapter[ParsedLink] = TypeAdapter(ParsedLink)
