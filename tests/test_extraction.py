"""Tests for finding links in text."""

from linkparser.models.model_link import LinkKind
from linkparser.parsing.extraction import extract_urls, parse_text

COMMENT_BODY = (
    "Check out /r/androiddev and u/someuser. "
    "Also [this gif](https://i.imgur.com/abcd123.gifv) and https://example.com/page."
)


class TestExtractUrls:
    """Tests for extract_urls function."""

    def test_mixed_comment(self) -> None:
        assert extract_urls(COMMENT_BODY) == [
            "/r/androiddev",
            "/u/someuser",
            "https://i.imgur.com/abcd123.gifv",
            "https://example.com/page",
        ]

    def test_empty_text(self) -> None:
        assert extract_urls("") == []

    def test_no_links(self) -> None:
        assert extract_urls("Nothing to see here, move along.") == []

    def test_deduplicates(self) -> None:
        text = "https://redd.it/5524cd and again https://redd.it/5524cd"
        assert extract_urls(text) == ["https://redd.it/5524cd"]

    def test_trailing_punctuation(self) -> None:
        text = "See https://example.com/a?b=1, or (https://example.com/c)!"
        assert extract_urls(text) == ["https://example.com/a?b=1", "https://example.com/c"]

    def test_markdown_relative_target(self) -> None:
        assert extract_urls("[my sub](/r/androiddev)") == ["/r/androiddev"]

    def test_markdown_with_title(self) -> None:
        text = '[gif](https://i.imgur.com/abcd123.gif "funny")'
        assert extract_urls(text) == ["https://i.imgur.com/abcd123.gif"]

    def test_reddit_urls_are_not_split_into_references(self) -> None:
        text = "https://www.reddit.com/r/test/comments/abc123/title/def456?context=3"
        assert extract_urls(text) == [text]

    def test_references_inside_words_are_ignored(self) -> None:
        assert extract_urls("either/or and tr/test and color/u/x") == []


class TestParseText:
    """Tests for parse_text function."""

    def test_mixed_comment(self) -> None:
        links = parse_text(COMMENT_BODY)
        assert [link.kind for link in links] == [
            LinkKind.SUBREDDIT,
            LinkKind.USER,
            LinkKind.MEDIA,
            LinkKind.EXTERNAL,
        ]

    def test_media_is_normalized(self) -> None:
        links = parse_text("[gif](https://i.imgur.com/abcd123.gifv)")
        assert len(links) == 1
        assert links[0].url == "https://i.imgur.com/abcd123.mp4"
