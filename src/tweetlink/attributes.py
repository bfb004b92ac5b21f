"""HTML attribute rendering.

Turns a mapping of attribute name to value into the serialized attribute
string placed inside an ``<a>`` tag. Option keys that configure linking
behaviour rather than markup are filtered out first.

Example:
    >>> html_attrs_for_options({"disabled": False, "target": "_blank"})
    ' target="_blank"'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tweetlink.utils.text import html_escape

BOOLEAN_ATTRIBUTES: frozenset[str] = frozenset(("disabled", "readonly", "multiple", "checked"))

# Behavioural options; never serialized as attributes
OPTIONS_NOT_ATTRIBUTES: frozenset[str] = frozenset(
    (
        "url_class",
        "list_class",
        "username_class",
        "hashtag_class",
        "username_url_base",
        "list_url_base",
        "hashtag_url_base",
        "username_url_resolver",
        "list_url_resolver",
        "hashtag_url_resolver",
        "link_url_resolver",
        "suppress_lists",
        "suppress_no_follow",
        "url_entities",
    )
)

HTML_ATTR_NO_FOLLOW: Mapping[str, str] = {"rel": "nofollow"}


def html_attrs(attributes: Mapping[str, Any]) -> str:
    """Serialize attributes in mapping order.

    Boolean attributes render as ``name="name"`` when truthy and are omitted
    when falsy. Entries whose value is None contribute nothing.

    Args:
        attributes: Attribute name to value

    Returns:
        String with a leading space per attribute, or "" if none qualify
    """
    parts: list[str] = []
    for key, value in attributes.items():
        if key in BOOLEAN_ATTRIBUTES:
            value = key if value else None
        if value is not None:
            parts.append(f' {html_escape(key)}="{html_escape(value)}"')
    return "".join(parts)


def html_attrs_for_options(options: Mapping[str, Any]) -> str:
    """Drop behavioural option keys, then render the rest as attributes."""
    return html_attrs({k: v for k, v in options.items() if k not in OPTIONS_NOT_ATTRIBUTES})


__all__ = [
    "BOOLEAN_ATTRIBUTES",
    "HTML_ATTR_NO_FOLLOW",
    "OPTIONS_NOT_ATTRIBUTES",
    "html_attrs",
    "html_attrs_for_options",
]
