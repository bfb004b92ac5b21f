"""Utility modules for tweetlink.

Provides:
- text: html_escape for markup-safe text
- logger: get_logger for logging
"""

from tweetlink.utils.logger import get_logger
from tweetlink.utils.text import HTML_ENTITIES, html_escape

__all__ = [
    "HTML_ENTITIES",
    "get_logger",
    "html_escape",
]
