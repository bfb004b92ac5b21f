"""
tweetlink — Autolink hashtags, @usernames, lists, and URLs in short messages

Turns plain message text into HTML by wrapping each recognized entity in an
anchor. Everything taken from the input is escaped, and text already inside
markup is left alone.

Quick Start:
    >>> from tweetlink import auto_link
    >>> auto_link("Hello @jack")
    'Hello @<a class="tweet-url username" href="http://twitter.com/jack" rel="nofollow">jack</a>'

    >>> # Reuse one set of options
    >>> from tweetlink import Autolinker
    >>> linker = Autolinker({"target": "_blank", "suppress_lists": True})
    >>> html = linker("#python news from @psf/members")

Custom hrefs:
    >>> auto_link_hashtags("#python", {"hashtag_url_resolver": lambda tag: f"/tags/{tag}"})
    '<a href="/tags/python" title="#python" class="tweet-url hashtag" rel="nofollow">#python</a>'
"""

from tweetlink.attributes import html_attrs, html_attrs_for_options
from tweetlink.autolink import (
    Autolinker,
    auto_link,
    auto_link_hashtags,
    auto_link_urls_custom,
    auto_link_usernames_or_lists,
)
from tweetlink.config import AutolinkConfig, UrlEntity
from tweetlink.detection import (
    EntityKind,
    EntityMatch,
    extract_hashtags,
    extract_mentioned_screen_names,
    extract_urls,
)
from tweetlink.errors import ConfigError, TweetlinkError
from tweetlink.utils.text import html_escape

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Linking
    "auto_link",
    "auto_link_hashtags",
    "auto_link_urls_custom",
    "auto_link_usernames_or_lists",
    "Autolinker",
    # Configuration
    "AutolinkConfig",
    "UrlEntity",
    # Extraction
    "EntityKind",
    "EntityMatch",
    "extract_hashtags",
    "extract_mentioned_screen_names",
    "extract_urls",
    # Markup helpers
    "html_attrs",
    "html_attrs_for_options",
    "html_escape",
    # Errors
    "ConfigError",
    "TweetlinkError",
]
