"""StringBuilder for O(n) output assembly.

Substitution splices rendered anchors between slices of the original text.
Parts go into a list and are joined once at the end, instead of growing a
string with repeated concatenation.

Thread Safety:
StringBuilder instances are local to each substitution.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("Hi ").append('<a href="http://twitter.com/jack">jack</a>')
            >>> sb.build()
            'Hi <a href="http://twitter.com/jack">jack</a>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string; empty strings are skipped. Returns self for chaining."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)
