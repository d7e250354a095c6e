from typing import Final

# Reddit hosts
REDDIT_DOMAIN: Final[str] = "reddit.com"
REDDIT_SHORT_DOMAIN: Final[str] = "redd.it"  # redd.it/<post_id>
REDDIT_UPLOADS_DOMAIN: Final[str] = "reddituploads.com"  # Sends HTML-escaped URLs

# Google AMP proxy, e.g. https://www.google.com/amp/s/amp.reddit.com/r/...
GOOGLE_DOMAIN_MARKER: Final[str] = "google"
GOOGLE_AMP_PREFIX: Final[str] = "/amp/s/"
GOOGLE_AMP_REDDIT_PREFIX: Final[str] = "/amp/s/amp.reddit.com"
MAX_AMP_UNWRAPS: Final[int] = 1

# Media hosts
IMGUR_DOMAINS: Final[tuple[str, ...]] = ("imgur.com", "bildgur.de")
IMGUR_DIRECT_HOST: Final[str] = "i.imgur.com"
GFYCAT_DOMAIN: Final[str] = "gfycat.com"
GIPHY_DOMAIN: Final[str] = "giphy.com"
GIPHY_DIRECT_HOST: Final[str] = "i.giphy.com"

# File extensions
IMAGE_EXTENSIONS: Final[tuple[str, ...]] = (".png", ".jpg", ".jpeg", ".gif")
VIDEO_EXTENSION: Final[str] = ".mp4"
IMGUR_GIF_EXTENSIONS: Final[tuple[str, ...]] = (".gif", ".gifv")
IMGUR_GUESSED_EXTENSION: Final[str] = ".jpg"

# Used when a URL is scheme-relative (//imgur.com/abc) and a new URL must be built
DEFAULT_SCHEME: Final[str] = "https"
