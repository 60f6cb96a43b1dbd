"""Incremental HTML document assembly.

DocumentBuilder collects output fragments while the parser runs. Each
fragment is one finished line of output; ``finish()`` joins them once at
the end, the same append-then-join pattern as a string builder.

On top of the fragment list sits a small state machine:

- head may be declared once, and only before body opens
- body opens at most once; ``finish()`` synthesizes an empty body if needed
- the document is closed exactly once (``</body>`` then ``</html>``)
- paragraphs switch free text from word-per-line to whole-block rendering

Inline text (title, bold, italics, comments, free text) is emitted as
written. Callers that need escaping do it before calling ``raw()``.

Thread Safety:
Builder instances are owned by one Parser for one compilation.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto

from lolmark.config import CompileConfig, get_compile_config
from lolmark.errors import DocumentError
from lolmark.utils.text import normalize_newlines

DOCTYPE = "<!doctype html>"
HTML_OPEN = "<html>"
HTML_CLOSE = "</html>"
BODY_OPEN = "<body>"
BODY_CLOSE = "</body>"


class BodyState(Enum):
    """Lifecycle of the ``<body>`` element."""

    UNOPENED = auto()
    OPEN = auto()
    CLOSED = auto()


class DocumentBuilder:
    """Ordered fragment collector that keeps the document well formed.

    Usage:
            >>> doc = DocumentBuilder()
            >>> doc.begin_document()
            >>> doc.text("red blue")
            >>> print(doc.finish())
            <!doctype html>
            <html>
            <body>
            red
            blue
            </body>
            </html>

    """

    __slots__ = (
        "_parts",
        "_had_head",
        "_head_open",
        "_body",
        "_word_per_line",
        "_default_word_per_line",
        "_separator",
        "_finished",
    )

    def __init__(self, config: CompileConfig | None = None) -> None:
        """Initialize an empty document.

        Args:
            config: Settings to render with (the active compile config if None)
        """
        config = config or get_compile_config()
        self._parts: list[str] = []
        self._had_head = False
        self._head_open = False
        self._body = BodyState.UNOPENED
        self._default_word_per_line = config.word_per_line
        self._word_per_line = config.word_per_line
        self._separator = config.fragment_separator
        self._finished = False

    # =========================================================================
    # State accessors
    # =========================================================================

    @property
    def fragments(self) -> Sequence[str]:
        """Fragments emitted so far (read-only view)."""
        return tuple(self._parts)

    @property
    def has_head(self) -> bool:
        return self._had_head

    @property
    def body_open(self) -> bool:
        return self._body is BodyState.OPEN

    @property
    def word_per_line(self) -> bool:
        return self._word_per_line

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    # =========================================================================
    # Structure
    # =========================================================================

    def raw(self, fragment: str) -> None:
        """Append a fragment verbatim.

        Used for constructs the builder does not track (lists, variable
        values, media embeds). Body placement is the caller's concern.
        """
        if self._finished:
            raise DocumentError("Document already finished")
        self._parts.append(fragment)

    def begin_document(self) -> None:
        self.raw(DOCTYPE)
        self.raw(HTML_OPEN)

    def end_document(self) -> None:
        self.raw(HTML_CLOSE)

    def begin_head(self) -> None:
        """Open ``<head>``.

        Raises:
            DocumentError: If body has already been opened or head was declared
        """
        if self._body is not BodyState.UNOPENED:
            raise DocumentError("Cannot open head after body")
        if self._had_head:
            raise DocumentError("Head already declared")
        self._had_head = True
        self._head_open = True
        self.raw("<head>")

    def end_head(self) -> None:
        self._head_open = False
        self.raw("</head>")

    def title(self, text: str) -> None:
        self.raw(f"<title>{text.strip()}</title>")

    def begin_body(self) -> None:
        """Open ``<body>`` once; later calls are no-ops.

        Closes a still-open head first so head always precedes body.
        """
        if self._body is not BodyState.UNOPENED:
            return
        if self._head_open:
            self.end_head()
        self._body = BodyState.OPEN
        self._word_per_line = self._default_word_per_line
        self.raw(BODY_OPEN)

    def end_body(self) -> None:
        """Close ``<body>`` if it is open."""
        if self._body is not BodyState.OPEN:
            return
        self._body = BodyState.CLOSED
        self.raw(BODY_CLOSE)

    def begin_paragraph(self) -> None:
        self.begin_body()
        self.raw("<p>")
        self._word_per_line = False

    def end_paragraph(self) -> None:
        self.raw("</p>")
        self._word_per_line = self._default_word_per_line

    # =========================================================================
    # Content
    # =========================================================================

    def text(self, text: str) -> None:
        """Emit free text.

        Line breaks become spaces. Blank text emits nothing. In
        word-per-line mode each whitespace-separated word is its own
        fragment; otherwise the trimmed text is a single fragment.
        """
        self.begin_body()
        flat = normalize_newlines(text)
        if not flat.strip():
            return

        if self._word_per_line:
            for word in flat.split():
                self.raw(word)
        else:
            self.raw(flat.strip())

    def bold(self, text: str) -> None:
        self.begin_body()
        self.raw(f"<b>{text.strip()}</b>")

    def italics(self, text: str) -> None:
        self.begin_body()
        self.raw(f"<i>{text.strip()}</i>")

    def comment(self, text: str) -> None:
        self.raw(f"<!-- {text.strip()} -->")

    def line_break(self) -> None:
        self.begin_body()
        self.raw("<br>")

    # =========================================================================
    # Finalization
    # =========================================================================

    def finish(self) -> str:
        """Close the document and return it as a single string.

        Synthesizes an empty body when none was opened, closes an open
        body unless the last fragment already closes it, and appends
        ``</html>``. The builder cannot be used afterwards.

        Returns:
            The complete document, fragments joined by the configured separator
        """
        if self._finished:
            raise DocumentError("Document already finished")

        if self._body is BodyState.UNOPENED:
            self.begin_body()
            self.end_body()
        elif self._body is BodyState.OPEN:
            if self._parts and self._parts[-1] == BODY_CLOSE:
                self._body = BodyState.CLOSED
            else:
                self.end_body()

        self.end_document()
        self._finished = True
        return self._separator.join(self._parts)
