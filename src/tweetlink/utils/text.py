"""Text escaping for tweetlink.

Everything that ends up in generated markup and did not come from the
markup builders themselves passes through html_escape().

Example:
    >>> from tweetlink.utils.text import html_escape
    >>> html_escape("Tom & Jerry")
    'Tom &amp; Jerry'
"""

from __future__ import annotations

import re
from typing import Any

HTML_ENTITIES: dict[str, str] = {
    "&": "&amp;",
    ">": "&gt;",
    "<": "&lt;",
    '"': "&quot;",
    "'": "&#39;",
}

_HTML_ESCAPE_RE = re.compile(r"[&\"'><]")


def html_escape(value: Any) -> str | None:
    """Escape the five reserved HTML characters.

    Each character is replaced exactly once in a single pass, so existing
    entities such as ``&amp;`` are escaped again rather than preserved.

    Args:
        value: Any value; non-strings are converted with str()

    Returns:
        Escaped text, or None when value is None

    Examples:
        >>> html_escape("<b>\\"hi\\" & 'bye'</b>")
        '&lt;b&gt;&quot;hi&quot; &amp; &#39;bye&#39;&lt;/b&gt;'
        >>> html_escape(42)
        '42'
        >>> html_escape(None) is None
        True
    """
    if value is None:
        return None
    return _HTML_ESCAPE_RE.sub(lambda m: HTML_ENTITIES[m.group(0)], str(value))
