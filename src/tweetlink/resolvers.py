"""Href resolution strategies.

A resolver turns the identifying text of an entity (a hashtag, a username,
a ``user/list`` pair, or a raw URL) into the value of the anchor's ``href``.
Callers may pass any callable with that shape through the configuration;
when they don't, the built-in strategies below are used.

Thread Safety:
    Built-in resolvers are frozen dataclasses with no mutable state.
    Caller-supplied resolvers are invoked inline, once per match, and their
    exceptions propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from tweetlink.utils.text import html_escape


class LinkResolver(Protocol):
    """Anything that maps an entity identifier to an href."""

    def __call__(self, identifier: str) -> str: ...


@dataclass(frozen=True, slots=True)
class BaseUrlResolver:
    """Append the escaped identifier to an escaped base URL.

    Example:
        >>> BaseUrlResolver("http://twitter.com/")("jack")
        'http://twitter.com/jack'
    """

    base: str

    def __call__(self, identifier: str) -> str:
        return f"{html_escape(self.base)}{html_escape(identifier)}"


@dataclass(frozen=True, slots=True)
class EscapedUrlResolver:
    """Use the URL itself, escaped for an attribute value."""

    def __call__(self, identifier: str) -> str:
        return html_escape(identifier) or ""


__all__ = [
    "BaseUrlResolver",
    "EscapedUrlResolver",
    "LinkResolver",
]
