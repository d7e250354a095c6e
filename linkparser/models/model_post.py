"""Post metadata supplied alongside a URL by callers that hold a full post."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PostHint(str, Enum):
    """Reddit's own guess of what a post links to.

    Not very accurate: Reddit reports LINK for its own image host, for
    example. Only used as a last resort by the parser.
    """

    IMAGE = "image"
    HOSTED_VIDEO = "hosted:video"
    RICH_VIDEO = "rich:video"
    LINK = "link"
    SELF = "self"


class PreviewImage(BaseModel):
    """A single preview image precomputed by Reddit."""

    model_config = ConfigDict(frozen=True)

    url: str
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)


class Thumbnails(BaseModel):
    """Reddit-supplied preview images of a post in multiple sizes."""

    model_config = ConfigDict(frozen=True)

    source: PreviewImage | None = Field(default=None, description="Full size preview")
    variations: tuple[PreviewImage, ...] = Field(
        default_factory=tuple, description="Downscaled copies, smallest first"
    )

    def closest_to_width(self, width: int) -> PreviewImage | None:
        """Pick the smallest preview that is at least `width` wide.

        Falls back to the largest available image when none is wide enough.
        """
        images = sorted(
            [*self.variations, *([self.source] if self.source else [])],
            key=lambda image: image.width,
        )
        if not images:
            return None
        for image in images:
            if image.width >= width:
                return image
        return images[-1]


class PostMetadata(BaseModel):
    """The subset of a Reddit post the parser looks at."""

    model_config = ConfigDict(frozen=True)

    url: str
    post_hint: PostHint | None = None
    thumbnails: Thumbnails | None = None
