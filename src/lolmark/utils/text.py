"""Text processing utilities for lolmark."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27; (the hexadecimal form of &#39;; browsers treat both alike)

    Only media source attributes go through this; inline text is emitted
    as written.

    Examples:
        >>> escape_html('clip.mp3?a=1&b="2"')
        'clip.mp3?a=1&amp;b=&quot;2&quot;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def normalize_newlines(text: str) -> str:
    """Replace carriage returns and line feeds with single spaces."""
    return text.replace("\r", " ").replace("\n", " ")
