"""Pytest configuration and fixtures."""

import pytest

from linkparser.models.model_post import PostHint, PostMetadata, PreviewImage, Thumbnails


@pytest.fixture
def sample_thumbnails() -> Thumbnails:
    """Preview images as Reddit supplies them for an image post."""
    return Thumbnails(
        source=PreviewImage(url="https://i.redditmedia.com/source.jpg", width=1920, height=1080),
        variations=(
            PreviewImage(url="https://i.redditmedia.com/108.jpg", width=108, height=60),
            PreviewImage(url="https://i.redditmedia.com/320.jpg", width=320, height=180),
            PreviewImage(url="https://i.redditmedia.com/640.jpg", width=640, height=360),
        ),
    )


@pytest.fixture
def image_post(sample_thumbnails: Thumbnails) -> PostMetadata:
    """A post linking to an imgur image."""
    return PostMetadata(
        url="https://i.imgur.com/abcd123.jpg",
        post_hint=PostHint.IMAGE,
        thumbnails=sample_thumbnails,
    )


@pytest.fixture
def self_post(sample_thumbnails: Thumbnails) -> PostMetadata:
    """A self post, which links back to its own comments page."""
    return PostMetadata(
        url="https://www.reddit.com/r/androiddev/comments/5524cd/weekly_questions_thread/",
        post_hint=PostHint.SELF,
        thumbnails=sample_thumbnails,
    )
