"""Inline parsing for the lolmark parser.

Handles the constructs that may appear inside paragraphs, list items and
the body: free text, text runs, comments, bold, italics and line breaks.
Every routine validates token order and emits into the DocumentBuilder in
the same step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lolmark.tokens import TokenType

if TYPE_CHECKING:
    from lolmark.document import DocumentBuilder


class InlineParsingMixin:
    """Mixin for inline content.

    Required Host Attributes:
        - _doc: DocumentBuilder

    Required Host Methods:
        - _at(*types) -> bool
        - _advance() -> Token
        - _expect(token_type, what=None) -> Token
        - _syntax_error(message, token=None) -> ParseError
        - _parse_variable_use() -> None

    """

    _doc: DocumentBuilder

    def _parse_text_run(self, context: str) -> str:
        """Parse ``TEXT* #MKAY`` and return the texts joined by spaces.

        Args:
            context: Construct being parsed, for error messages
        """
        parts: list[str] = []
        while not self._at(TokenType.MKAY, TokenType.EOF):
            if not self._at(TokenType.TEXT):
                raise self._syntax_error(
                    f"only text is allowed before #MKAY in {context}, "
                    f"found {self._current.describe()}"
                )
            parts.append(self._advance().value)
        self._expect(TokenType.MKAY)
        return " ".join(parts)

    def _parse_comment(self) -> None:
        """Parse ``#OBTW TEXT* #TLDR`` and emit an HTML comment."""
        self._expect(TokenType.OBTW)
        parts: list[str] = []
        while not self._at(TokenType.TLDR, TokenType.EOF):
            if not self._at(TokenType.TEXT):
                raise self._syntax_error(
                    "only text is allowed inside #OBTW ... #TLDR comments, "
                    f"found {self._current.describe()}"
                )
            parts.append(self._advance().value)
        self._expect(TokenType.TLDR)
        self._doc.comment(" ".join(parts))

    def _parse_text(self) -> None:
        token = self._expect(TokenType.TEXT)
        self._doc.text(token.value)

    def _parse_bold(self) -> None:
        self._expect(TokenType.BOLD)
        self._doc.bold(self._parse_text_run("BOLD"))

    def _parse_italics(self) -> None:
        self._expect(TokenType.ITALICS)
        self._doc.italics(self._parse_text_run("ITALICS"))

    def _parse_newline(self) -> None:
        """Parse ``NEWLINE #MKAY`` and emit a line break."""
        self._expect(TokenType.NEWLINE)
        self._expect(TokenType.MKAY)
        self._doc.line_break()

    def _parse_gimmeh_inline(self, context: str) -> None:
        """Parse ``#GIMMEH (BOLD | ITALICS | NEWLINE)``.

        Args:
            context: Enclosing construct, for error messages
        """
        self._expect(TokenType.GIMMEH)
        match self._current.type:
            case TokenType.BOLD:
                self._parse_bold()
            case TokenType.ITALICS:
                self._parse_italics()
            case TokenType.NEWLINE:
                self._parse_newline()
            case _:
                raise self._syntax_error(
                    f"expected BOLD, ITALICS or NEWLINE after #GIMMEH in {context}, "
                    f"found {self._current.describe()}"
                )

    def _parse_inline_run(self, context: str) -> None:
        """Parse rich inline content up to and including ``#MKAY``.

        Accepts text, bold, italics, line breaks, variable uses and comments.
        """
        while not self._at(TokenType.MKAY, TokenType.EOF):
            match self._current.type:
                case TokenType.GIMMEH:
                    self._parse_gimmeh_inline(context)
                case TokenType.LEMME_SEE:
                    self._parse_variable_use()
                case TokenType.TEXT:
                    self._parse_text()
                case TokenType.OBTW:
                    self._parse_comment()
                case _:
                    raise self._syntax_error(
                        f"unexpected {self._current.describe()} in {context}"
                    )
        self._expect(TokenType.MKAY)
