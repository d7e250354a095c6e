"""Classifies URLs found on Reddit into `ParsedLink` variants.

Reddit's own post hint is not very accurate: it fails to identify a lot of
URLs and reports its own image host as a plain link. This parser identifies
URLs by matching them against known Reddit URL shapes and media hosts.

Rules are tried in order and the first one that builds a link wins:
1. Reddit URLs (posts, comments, live threads, /r/ and /u/ references,
   redd.it short links, Google AMP wrapped Reddit URLs)
2. Media hosts (imgur, gfycat, giphy, reddituploads)
3. Direct image and video paths
4. The caller's post hint, for hostless paths, when it declares an image or a
   hosted video
5. Fallback to an external link

Parsing never raises. Unrecognized input is an `ExternalLink`.
"""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final
from urllib.parse import quote, urlsplit, urlunsplit

from linkparser.consts import (
    DEFAULT_SCHEME,
    GFYCAT_DOMAIN,
    GIPHY_DIRECT_HOST,
    GIPHY_DOMAIN,
    GOOGLE_AMP_PREFIX,
    GOOGLE_AMP_REDDIT_PREFIX,
    GOOGLE_DOMAIN_MARKER,
    IMGUR_DIRECT_HOST,
    IMGUR_DOMAINS,
    IMGUR_GIF_EXTENSIONS,
    IMGUR_GUESSED_EXTENSION,
    MAX_AMP_UNWRAPS,
    REDDIT_DOMAIN,
    REDDIT_SHORT_DOMAIN,
    REDDIT_UPLOADS_DOMAIN,
    VIDEO_EXTENSION,
)
from linkparser.models.model_link import (
    CommentLink,
    ExternalLink,
    MediaHost,
    MediaKind,
    MediaLink,
    ParsedLink,
    SubmissionLink,
    SubredditLink,
    UnsupportedLink,
    UserLink,
)
from linkparser.models.model_post import PostHint, PostMetadata
from linkparser.parsing.html_text import unescape_html_url
from linkparser.parsing.url_parts import UrlParts, is_image_path, query_int, split_url

logger = logging.getLogger(__name__)


# /r/$subreddit
SUBREDDIT_PATTERN: Final = re.compile(r"^/r/([a-zA-Z0-9_.-]+)/*$")

# /u/$user
USER_PATTERN: Final = re.compile(r"^/u/([a-zA-Z0-9_.-]+)/*$")

# Submission: /r/$subreddit/comments/$post_id/$post_title
# Comment:    /r/$subreddit/comments/$post_id/$post_title/$comment_id
# '/r/$subreddit' and '$post_title' can be empty.
SUBMISSION_OR_COMMENT_PATTERN: Final = re.compile(
    r"^(?:/r/(?P<subreddit>[a-zA-Z0-9_.-]+))?"
    r"/comments/(?P<submission_id>\w+)"
    r"(?:/(?P<title>\w*)(?:/(?P<comment_id>\w*))?)?"
    r".*$"
)

# /live/$thread_id
LIVE_THREAD_PATTERN: Final = re.compile(r"^/live/\w*/*$")

# Gfycat id: the first path segment up to a '-' or '.'
#   /MessySpryAfricancivet
#   /MessySpryAfricancivet.gif
#   /MessySpryAfricancivet-size_restricted.gif
#   /MessySpryAfricancivet.webm
#   /MessySpryAfricancivet-mobile.mp4
GFYCAT_ID_PATTERN: Final = re.compile(r"^/(?P<gfycat_id>[^-./]+)")

# Giphy id, 'l2JJyLbhqCF4va86c' in these examples:
#   /media/l2JJyLbhqCF4va86c/giphy.mp4
#   /media/l2JJyLbhqCF4va86c/giphy.gif
#   /gifs/l2JJyLbhqCF4va86c/html5
#   /l2JJyLbhqCF4va86c.gif
GIPHY_ID_PATTERN: Final = re.compile(
    r"^/(?:(?:media|gifs)/(?P<prefixed_id>\w+)(?:[/.].*)?|(?P<bare_id>\w+)\.\w+)$"
)


@dataclass(frozen=True)
class ParseContext:
    """Per-call state threaded through the rules."""

    hint: PostHint | None = None
    amp_unwraps: int = 0


@dataclass(frozen=True)
class LinkRule:
    """One step of the rule chain.

    `build` may return None to let the next rule try.
    """

    name: str
    applies: Callable[[UrlParts], bool]
    build: Callable[[UrlParts, ParseContext], ParsedLink | None]


# === Reddit rules ===


def _is_reddit_domain(parts: UrlParts) -> bool:
    return parts.domain.endswith(REDDIT_DOMAIN)


def _is_relative(parts: UrlParts) -> bool:
    return parts.domain == ""


def _is_short_link(parts: UrlParts) -> bool:
    return (
        not _is_reddit_domain(parts)
        and parts.domain.endswith(REDDIT_SHORT_DOMAIN)
        and not is_image_path(parts.path)
    )


def _is_google_amp(parts: UrlParts) -> bool:
    return (
        not _is_reddit_domain(parts)
        and GOOGLE_DOMAIN_MARKER in parts.domain
        and parts.path.startswith(GOOGLE_AMP_REDDIT_PREFIX)
    )


def _build_submission(parts: UrlParts, ctx: ParseContext) -> ParsedLink | None:
    match = SUBMISSION_OR_COMMENT_PATTERN.match(parts.path)
    if not match:
        return None

    comment_id = match.group("comment_id")
    initial_comment = None
    if comment_id:
        initial_comment = CommentLink(
            comment_id=comment_id,
            context_depth=query_int(parts.query, "context"),
        )

    return SubmissionLink(
        url=parts.url,
        submission_id=match.group("submission_id"),
        subreddit_name=match.group("subreddit"),
        initial_comment=initial_comment,
    )


def _build_live_thread(parts: UrlParts, ctx: ParseContext) -> ParsedLink | None:
    if LIVE_THREAD_PATTERN.match(parts.path):
        return UnsupportedLink(url=parts.url)
    return None


def _build_subreddit(parts: UrlParts, ctx: ParseContext) -> ParsedLink | None:
    match = SUBREDDIT_PATTERN.match(parts.path)
    return SubredditLink(name=match.group(1)) if match else None


def _build_user(parts: UrlParts, ctx: ParseContext) -> ParsedLink | None:
    match = USER_PATTERN.match(parts.path)
    return UserLink(name=match.group(1)) if match else None


def _build_short_link(parts: UrlParts, ctx: ParseContext) -> ParsedLink | None:
    # Format: redd.it/$post_id. Carries no subreddit.
    submission_id = parts.path.strip("/").split("/")[0]
    if not submission_id:
        return None
    return SubmissionLink(url=parts.url, submission_id=submission_id, subreddit_name=None)


def _build_from_google_amp(parts: UrlParts, ctx: ParseContext) -> ParsedLink | None:
    # https://www.google.com/amp/s/amp.reddit.com/r/NoStupidQuestions/comments/2qwyo7/...
    if ctx.amp_unwraps >= MAX_AMP_UNWRAPS:
        logger.debug(f"Not unwrapping nested AMP URL: {parts.url}")
        return None

    start = parts.url.find(GOOGLE_AMP_PREFIX)
    if start == -1:
        return None

    wrapped = parts.url[start + len(GOOGLE_AMP_PREFIX) :]
    unwrapped_url = f"https://{wrapped}"
    logger.debug(f"Unwrapped AMP URL {parts.url} -> {unwrapped_url}")
    return _parse(
        unwrapped_url,
        ParseContext(hint=ctx.hint, amp_unwraps=ctx.amp_unwraps + 1),
    )


# === Media host rules ===


def _is_imgur(parts: UrlParts) -> bool:
    return any(domain in parts.domain for domain in IMGUR_DOMAINS)


def _is_gfycat(parts: UrlParts) -> bool:
    return GFYCAT_DOMAIN in parts.domain


def _is_giphy(parts: UrlParts) -> bool:
    return GIPHY_DOMAIN in parts.domain


def _is_reddit_uploads(parts: UrlParts) -> bool:
    return REDDIT_UPLOADS_DOMAIN in parts.domain


def _is_image_path(parts: UrlParts) -> bool:
    return is_image_path(parts.path)


def _is_video_path(parts: UrlParts) -> bool:
    return parts.path.lower().endswith(VIDEO_EXTENSION)


def _scheme(parts: UrlParts) -> str:
    return parts.scheme or DEFAULT_SCHEME


def _replace_extension(url: str, decoded_path: str, old_extension: str, new_extension: str) -> str:
    """Swap the extension at the end of a URL's path, keeping query and fragment.

    The raw path is edited in place when it ends in the extension. A
    percent-encoded ending (abc%2Egif) is rebuilt from the decoded path.
    """
    split = urlsplit(url.strip())
    if split.path.lower().endswith(old_extension):
        path = split.path[: -len(old_extension)] + new_extension
    else:
        path = quote(decoded_path[: -len(old_extension)] + new_extension)
    return urlunsplit(split._replace(path=path))


def _build_imgur(parts: UrlParts, ctx: ParseContext) -> ParsedLink:
    url = parts.url
    path = parts.path

    # Imgur serves GIFs as MP4s too, which are far lighter
    for gif_extension in IMGUR_GIF_EXTENSIONS:
        if path.lower().endswith(gif_extension):
            url = _replace_extension(url, path, gif_extension, VIDEO_EXTENSION)
            path = path[: -len(gif_extension)] + VIDEO_EXTENSION
            break

    # Reddit's preview copies are static images. Only safe for real images.
    is_direct_image = is_image_path(path)
    is_video = path.lower().endswith(VIDEO_EXTENSION)

    if not is_direct_image and not is_video:
        if not path.strip("/"):
            return ExternalLink(url=parts.url)
        # Guess a direct link for submission pages: imgur.com/djP1IZC -> i.imgur.com/djP1IZC.jpg.
        # GIF submissions end up as static images here.
        url = f"{_scheme(parts)}://{IMGUR_DIRECT_HOST}{path.rstrip('/')}{IMGUR_GUESSED_EXTENSION}"

    return MediaLink(
        url=url,
        host_supplied_direct=is_direct_image,
        media_kind=MediaKind.VIDEO if is_video else MediaKind.IMAGE_OR_GIF,
        host=MediaHost.IMGUR,
    )


def _build_gfycat(parts: UrlParts, ctx: ParseContext) -> ParsedLink:
    """Convert any gfycat URL into https://gfycat.com/$id.

    For example, these all point to the same gfycat:
    https://giant.gfycat.com/MessySpryAfricancivet.gif
    https://thumbs.gfycat.com/MessySpryAfricancivet-size_restricted.gif
    https://zippy.gfycat.com/MessySpryAfricancivet.webm
    https://thumbs.gfycat.com/MessySpryAfricancivet-mobile.mp4
    """
    match = GFYCAT_ID_PATTERN.match(parts.path)
    if not match:
        logger.warning(f"Couldn't find gfycat id in {parts.url}")
        return MediaLink(
            url=parts.url,
            host_supplied_direct=False,
            media_kind=MediaKind.VIDEO,
            host=MediaHost.GFYCAT,
        )

    return MediaLink(
        url=f"{_scheme(parts)}://{GFYCAT_DOMAIN}/{match.group('gfycat_id')}",
        host_supplied_direct=False,
        media_kind=MediaKind.VIDEO,
        host=MediaHost.GFYCAT,
    )


def _build_giphy(parts: UrlParts, ctx: ParseContext) -> ParsedLink:
    match = GIPHY_ID_PATTERN.match(parts.path)
    if not match:
        return ExternalLink(url=parts.url)

    giphy_id = match.group("prefixed_id") or match.group("bare_id")
    return MediaLink(
        url=f"{_scheme(parts)}://{GIPHY_DIRECT_HOST}/{giphy_id}{VIDEO_EXTENSION}",
        host_supplied_direct=False,
        media_kind=MediaKind.VIDEO,
        host=MediaHost.GIPHY,
    )


def _build_reddit_upload(parts: UrlParts, ctx: ParseContext) -> ParsedLink:
    # Reddit sends these URLs HTML-escaped
    return MediaLink(
        url=unescape_html_url(parts.url),
        host_supplied_direct=True,
        media_kind=MediaKind.IMAGE_OR_GIF,
        host=MediaHost.REDDIT_UPLOADS,
    )


def _build_direct_image(parts: UrlParts, ctx: ParseContext) -> ParsedLink:
    return MediaLink(url=parts.url, host_supplied_direct=True, media_kind=MediaKind.IMAGE_OR_GIF)


def _build_direct_video(parts: UrlParts, ctx: ParseContext) -> ParsedLink:
    return MediaLink(url=parts.url, host_supplied_direct=True, media_kind=MediaKind.VIDEO)


REDDIT_RULES: Final[tuple[LinkRule, ...]] = (
    LinkRule("reddit_submission", _is_reddit_domain, _build_submission),
    LinkRule("reddit_live_thread", _is_reddit_domain, _build_live_thread),
    LinkRule("subreddit", _is_relative, _build_subreddit),
    LinkRule("user", _is_relative, _build_user),
    LinkRule("short_link", _is_short_link, _build_short_link),
    LinkRule("google_amp", _is_google_amp, _build_from_google_amp),
)

MEDIA_RULES: Final[tuple[LinkRule, ...]] = (
    LinkRule("imgur", _is_imgur, _build_imgur),
    LinkRule("gfycat", _is_gfycat, _build_gfycat),
    LinkRule("giphy", _is_giphy, _build_giphy),
    LinkRule("reddit_uploads", _is_reddit_uploads, _build_reddit_upload),
    LinkRule("direct_image", _is_image_path, _build_direct_image),
    LinkRule("direct_video", _is_video_path, _build_direct_video),
)

RULES: Final[tuple[LinkRule, ...]] = REDDIT_RULES + MEDIA_RULES


def _from_post_hint(parts: UrlParts, hint: PostHint | None) -> ParsedLink | None:
    """Trust the caller's hint for hostless paths no rule recognized."""
    if hint == PostHint.IMAGE:
        media_kind = MediaKind.IMAGE_OR_GIF
    elif hint == PostHint.HOSTED_VIDEO:
        media_kind = MediaKind.VIDEO
    else:
        return None
    return MediaLink(url=parts.url, host_supplied_direct=False, media_kind=media_kind)


def _parse(url: str, ctx: ParseContext) -> ParsedLink:
    parts = split_url(url)

    for rule in RULES:
        if not rule.applies(parts):
            continue
        link = rule.build(parts, ctx)
        if link is not None:
            logger.debug(f"{rule.name} matched {url}")
            return link

    if parts.domain == "":
        return _from_post_hint(parts, ctx.hint) or ExternalLink(url=url)
    return ExternalLink(url=url)


def parse_url(url: str, hint: PostHint | None = None) -> ParsedLink:
    """Identify what a URL points to.

    Args:
        url: URL found in a post, comment or self-text. Scheme-relative and
            path-only references like '/r/androiddev' are valid.
        hint: Optional post hint from the post that linked this URL. Only
            consulted when no rule recognizes the URL.

    Returns:
        One ParsedLink variant. Never raises for malformed input.
    """
    return _parse(url, ParseContext(hint=hint))


def parse_post(post: PostMetadata) -> ParsedLink:
    """Identify what a post's URL points to.

    Media links also carry the post's Reddit-supplied preview images. The
    caller decides whether to use them, see `MediaLink.host_supplied_direct`.
    """
    link = parse_url(post.url, hint=post.post_hint)
    if isinstance(link, MediaLink) and post.thumbnails is not None:
        return link.with_preview_images(post.thumbnails)
    return link


def parse_urls(urls: Iterable[str]) -> list[ParsedLink]:
    """Parse several URLs, keeping their order."""
    return [parse_url(url) for url in urls]
