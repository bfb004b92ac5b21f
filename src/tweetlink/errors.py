"""Exception classes for tweetlink.

Text never raises: malformed or entity-free input passes through unchanged.
Only invalid configuration is reported, and exceptions raised by
caller-supplied URL resolvers propagate without being wrapped.
"""

from __future__ import annotations


class TweetlinkError(Exception):
    """Base exception for all tweetlink errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(TweetlinkError):
    """Invalid autolink option.

    Raised when an option value cannot be used, such as a URL resolver
    that is not callable or a URL entity record without a ``url``.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "hashtag_url_resolver")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
