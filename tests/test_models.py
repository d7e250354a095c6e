"""Tests for parsed link and post metadata models."""

import pytest
from pydantic import ValidationError

from linkparser.models.model_link import (
    PARSED_LINK_ADAPTER,
    CommentLink,
    ExternalLink,
    LinkKind,
    LinkType,
    MediaHost,
    MediaKind,
    MediaLink,
    SubmissionLink,
    SubredditLink,
    UnsupportedLink,
    UserLink,
)
from linkparser.models.model_post import PostHint, PostMetadata, PreviewImage, Thumbnails


class TestCommentLink:
    """Tests for CommentLink model."""

    def test_defaults(self) -> None:
        comment = CommentLink(comment_id="def456")
        assert comment.context_depth == 0
        assert comment.kind == LinkKind.COMMENT

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CommentLink(comment_id="")

    def test_negative_context_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CommentLink(comment_id="def456", context_depth=-1)


class TestImmutability:
    """Parsed links can't be modified after creation."""

    def test_submission_is_frozen(self) -> None:
        link = SubmissionLink(url="https://redd.it/5524cd", submission_id="5524cd")
        with pytest.raises(ValidationError):
            link.submission_id = "other"

    def test_media_is_frozen(self) -> None:
        link = MediaLink(
            url="https://example.com/a.jpg",
            host_supplied_direct=True,
            media_kind=MediaKind.IMAGE_OR_GIF,
        )
        with pytest.raises(ValidationError):
            link.url = "https://example.com/b.jpg"

    def test_with_preview_images_returns_copy(self, sample_thumbnails: Thumbnails) -> None:
        link = MediaLink(
            url="https://example.com/a.jpg",
            host_supplied_direct=True,
            media_kind=MediaKind.IMAGE_OR_GIF,
        )
        copy = link.with_preview_images(sample_thumbnails)
        assert copy.preview_images == sample_thumbnails
        assert link.preview_images is None
        assert copy.url == link.url


class TestLinkType:
    """Tests for the link_type property of each variant."""

    def test_reddit_hosted(self) -> None:
        assert SubmissionLink(url="u", submission_id="a").link_type == LinkType.REDDIT_HOSTED
        assert CommentLink(comment_id="a").link_type == LinkType.REDDIT_HOSTED
        assert SubredditLink(name="a").link_type == LinkType.REDDIT_HOSTED
        assert UserLink(name="a").link_type == LinkType.REDDIT_HOSTED
        assert UnsupportedLink(url="u").link_type == LinkType.REDDIT_HOSTED

    def test_media(self) -> None:
        image = MediaLink(url="u", host_supplied_direct=True, media_kind=MediaKind.IMAGE_OR_GIF)
        video = MediaLink(url="u", host_supplied_direct=True, media_kind=MediaKind.VIDEO)
        assert image.link_type == LinkType.IMAGE_OR_GIF
        assert video.link_type == LinkType.VIDEO

    def test_external(self) -> None:
        assert ExternalLink(url="u").link_type == LinkType.EXTERNAL


class TestParsedLinkAdapter:
    """Tests for validating and serializing the ParsedLink union."""

    def test_validates_by_kind(self) -> None:
        assert PARSED_LINK_ADAPTER.validate_python({"kind": "user", "name": "someuser"}) == UserLink(
            name="someuser"
        )
        assert PARSED_LINK_ADAPTER.validate_python(
            {"kind": "subreddit", "name": "androiddev"}
        ) == SubredditLink(name="androiddev")

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PARSED_LINK_ADAPTER.validate_python({"kind": "wiki", "name": "index"})

    def test_json_round_trip(self) -> None:
        link = MediaLink(
            url="https://gfycat.com/MessySpryAfricancivet",
            host_supplied_direct=False,
            media_kind=MediaKind.VIDEO,
            host=MediaHost.GFYCAT,
        )
        data = PARSED_LINK_ADAPTER.dump_json(link)
        assert PARSED_LINK_ADAPTER.validate_json(data) == link

    def test_dump_uses_plain_values(self) -> None:
        link = SubmissionLink(
            url="https://www.reddit.com/r/test/comments/abc123/title/def456?context=3",
            submission_id="abc123",
            subreddit_name="test",
            initial_comment=CommentLink(comment_id="def456", context_depth=3),
        )
        data = PARSED_LINK_ADAPTER.dump_python(link, mode="json")
        assert data["kind"] == "submission"
        assert data["initial_comment"] == {
            "kind": "comment",
            "comment_id": "def456",
            "context_depth": 3,
        }


class TestThumbnails:
    """Tests for Thumbnails model."""

    def test_closest_to_width(self, sample_thumbnails: Thumbnails) -> None:
        image = sample_thumbnails.closest_to_width(300)
        assert image is not None
        assert image.width == 320

    def test_exact_width(self, sample_thumbnails: Thumbnails) -> None:
        image = sample_thumbnails.closest_to_width(640)
        assert image is not None
        assert image.width == 640

    def test_wider_than_all_gives_largest(self, sample_thumbnails: Thumbnails) -> None:
        image = sample_thumbnails.closest_to_width(4000)
        assert image is not None
        assert image.width == 1920

    def test_empty(self) -> None:
        assert Thumbnails().closest_to_width(100) is None

    def test_only_source(self) -> None:
        thumbnails = Thumbnails(source=PreviewImage(url="https://a/b.jpg", width=500, height=500))
        assert thumbnails.closest_to_width(100) == thumbnails.source

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PreviewImage(url="https://a/b.jpg", width=-1)


class TestPostMetadata:
    """Tests for PostMetadata model."""

    def test_hint_from_reddit_value(self) -> None:
        post = PostMetadata.model_validate(
            {"url": "https://v.redd.it/abc", "post_hint": "hosted:video"}
        )
        assert post.post_hint == PostHint.HOSTED_VIDEO

    def test_defaults(self) -> None:
        post = PostMetadata(url="https://example.com")
        assert post.post_hint is None
        assert post.thumbnails is None
