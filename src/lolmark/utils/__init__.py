"""Utility modules for lolmark.

Provides:
- text: escape_html, normalize_newlines for output text
- logger: get_logger for logging
"""

from lolmark.utils.logger import get_logger
from lolmark.utils.text import escape_html, normalize_newlines

__all__ = [
    "escape_html",
    "get_logger",
    "normalize_newlines",
]
