"""Span detection for hashtags, usernames/lists, and URLs.

Detection is split in two steps so scanning stays independent of rendering:

1. ``scan_*`` lazily yields EntityMatch spans, ordered and non-overlapping.
2. substitute() splices a replacement for each span into the text.

``detect_*`` combines both and is what the autolink passes call.

Text that already looks like markup is never scanned: tags themselves and
the bodies of ``<a>`` elements are skipped, so running a pass over the output
of an earlier pass cannot link inside an anchor or its attributes.

Example:
    >>> [m.value for m in scan_hashtags("#python and #rust")]
    ['python', 'rust']
    >>> detect_usernames_or_lists("hi @jack", lambda m: m.marker + m.value.upper())
    'hi @JACK'

Thread Safety:
Compiled patterns are module-level and immutable. Scanning keeps only
local state.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from tweetlink.stringbuilder import StringBuilder

LATIN_ACCENTS = (
    "À-ÖØ-öø-ÿĀ-ɏ"
    "ɓɔɖɗəɛɣɨɯɲʉʋʻ"
    "Ḁ-ỿ"
)
AT_SIGNS = "@＠"
HASH_SIGNS = "#＃"

HASHTAG_RE = re.compile(
    rf"(?:^|(?<=[^0-9A-Za-z&/?]))"
    rf"([{HASH_SIGNS}])"
    rf"([0-9A-Za-z_]*[A-Za-z_][0-9A-Za-z_{LATIN_ACCENTS}]*)"
)

USERNAME_OR_LIST_RE = re.compile(
    rf"(?:^|(?<=[^A-Za-z0-9_!#$%&*{AT_SIGNS}])|(?<=RT:)|(?<=RT))"
    rf"([{AT_SIGNS}])"
    r"([A-Za-z0-9_]{1,20})"
    r"(/[A-Za-z][A-Za-z0-9_\-]{0,24})?"
)

# A username directly followed by one of these is part of something else
# (an email-like "@a@b", an accented word, "@http://...")
END_USERNAME_RE = re.compile(rf"[{AT_SIGNS}{LATIN_ACCENTS}]|://")

_URL_PRECEDING = r"(?:^|(?<=[^\-/\"'!=A-Za-z0-9_@＠$#＃.]))"
_URL_DOMAIN = r"(?:[^\W_](?:[\w\-]*[^\W_])?\.)+[A-Za-z]{2,}(?::[0-9]+)?"
_URL_PATH_CHAR = r"(?:\([^\s()]*\)|[.,]?[\w!*';:=+$/%#\[\]\-~|&@])"
_URL_PATH_END = r"(?:\([^\s()]*\)|[\w=#/+\-])"
_URL_QUERY = r"\?[\w!*'();:&=+$/%#\[\]\-.,~|@]*[\w&=#/]"

URL_RE = re.compile(
    rf"{_URL_PRECEDING}"
    rf"(https?://{_URL_DOMAIN}(?:/(?:{_URL_PATH_CHAR}*{_URL_PATH_END})?)?(?:{_URL_QUERY})?)",
    re.IGNORECASE,
)

# Existing markup: whole anchor elements first, then any other tag. A tag
# needs a name right after "<", so "<3" or "a < b" stay plain text.
MARKUP_RE = re.compile(
    r"<a\b[^>]*>.*?</a\s*>|</?[A-Za-z][A-Za-z0-9-]*(?:\s[^<>]*)?/?>",
    re.IGNORECASE | re.DOTALL,
)


class EntityKind(Enum):
    """Kind of entity a match represents."""

    HASHTAG = "hashtag"
    MENTION = "mention"
    URL = "url"


@dataclass(frozen=True, slots=True)
class EntityMatch:
    """One detected entity.

    Attributes:
        kind: Entity kind
        start: Offset of the first character of the entity (the marker, if any)
        end: Offset just past the entity
        text: The matched entity text, marker included
        marker: "#", "@" or their full-width forms; "" for URLs
        value: Hashtag word, username, or raw URL
        list_slug: "/listname" for list references, else None

    """

    kind: EntityKind
    start: int
    end: int
    text: str
    marker: str
    value: str
    list_slug: str | None = None

    @property
    def identifier(self) -> str:
        """Value plus list slug, e.g. "jack/team"."""
        return f"{self.value}{self.list_slug or ''}"


def _unlinked_segments(text: str) -> Iterator[tuple[int, str]]:
    """Yield (offset, segment) for the parts of text outside existing markup."""
    pos = 0
    for m in MARKUP_RE.finditer(text):
        if m.start() > pos:
            yield pos, text[pos : m.start()]
        pos = m.end()
    if pos < len(text):
        yield pos, text[pos:]


def scan_hashtags(text: str) -> Iterator[EntityMatch]:
    """Yield hashtag matches in order."""
    for offset, segment in _unlinked_segments(text):
        for m in HASHTAG_RE.finditer(segment):
            yield EntityMatch(
                kind=EntityKind.HASHTAG,
                start=offset + m.start(),
                end=offset + m.end(),
                text=m.group(0),
                marker=m.group(1),
                value=m.group(2),
            )


def scan_usernames_or_lists(text: str) -> Iterator[EntityMatch]:
    """Yield @username and @username/list matches in order."""
    for offset, segment in _unlinked_segments(text):
        for m in USERNAME_OR_LIST_RE.finditer(segment):
            if END_USERNAME_RE.match(segment, m.end()):
                continue
            yield EntityMatch(
                kind=EntityKind.MENTION,
                start=offset + m.start(),
                end=offset + m.end(),
                text=m.group(0),
                marker=m.group(1),
                value=m.group(2),
                list_slug=m.group(3),
            )


def scan_urls(text: str) -> Iterator[EntityMatch]:
    """Yield http(s) URL matches in order."""
    for offset, segment in _unlinked_segments(text):
        for m in URL_RE.finditer(segment):
            yield EntityMatch(
                kind=EntityKind.URL,
                start=offset + m.start(1),
                end=offset + m.end(1),
                text=m.group(1),
                marker="",
                value=m.group(1),
            )


def substitute(
    text: str,
    matches: Iterable[EntityMatch],
    replace: Callable[[EntityMatch], str],
) -> str:
    """Replace each match span with replace(match).

    Matches must be ordered and non-overlapping. replace() is called once
    per match, in order. Text between matches is copied unchanged.
    """
    sb = StringBuilder()
    pos = 0
    for match in matches:
        sb.append(text[pos : match.start])
        sb.append(replace(match))
        pos = match.end
    if pos == 0:
        return text
    sb.append(text[pos:])
    return sb.build()


def detect_hashtags(text: str, replace: Callable[[EntityMatch], str]) -> str:
    return substitute(text, scan_hashtags(text), replace)


def detect_usernames_or_lists(text: str, replace: Callable[[EntityMatch], str]) -> str:
    return substitute(text, scan_usernames_or_lists(text), replace)


def detect_urls(text: str, replace: Callable[[EntityMatch], str]) -> str:
    return substitute(text, scan_urls(text), replace)


def extract_hashtags(text: str) -> list[str]:
    """Return hashtag words (without marker) in order of appearance."""
    return [m.value for m in scan_hashtags(text or "")]


def extract_mentioned_screen_names(text: str) -> list[str]:
    """Return mentioned usernames (without "@" or list slug) in order."""
    return [m.value for m in scan_usernames_or_lists(text or "")]


def extract_urls(text: str) -> list[str]:
    """Return URLs in order of appearance."""
    return [m.value for m in scan_urls(text or "")]


__all__ = [
    "EntityKind",
    "EntityMatch",
    "detect_hashtags",
    "detect_urls",
    "detect_usernames_or_lists",
    "extract_hashtags",
    "extract_mentioned_screen_names",
    "extract_urls",
    "scan_hashtags",
    "scan_urls",
    "scan_usernames_or_lists",
    "substitute",
]
