"""Token navigation utilities for the lolmark parser.

Provides the one-token lookahead buffer. The buffer is refilled on demand
from the lexer's pull-based ``next_token()``; tokens are never collected
into a list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lolmark.errors import ParseError
from lolmark.tokens import Token, TokenType

if TYPE_CHECKING:
    from lolmark.lexer import Lexer


class TokenNavigationMixin:
    """Mixin providing lookahead and expectation helpers.

    Required Host Attributes:
        - _lexer: Lexer
        - _current: Token

    """

    _lexer: Lexer
    _current: Token

    def _at(self, *types: TokenType) -> bool:
        """Check whether the lookahead is one of ``types``."""
        return self._current.type in types

    def _at_end(self) -> bool:
        return self._current.type is TokenType.EOF

    def _advance(self) -> Token:
        """Consume the lookahead and pull the next token.

        Returns:
            The token that was consumed
        """
        consumed = self._current
        self._current = self._lexer.next_token()
        return consumed

    def _expect(self, token_type: TokenType, what: str | None = None) -> Token:
        """Consume a token of ``token_type`` or fail.

        Args:
            token_type: Required kind of the lookahead
            what: Optional description used instead of the kind's spelling

        Returns:
            The consumed token

        Raises:
            ParseError: If the lookahead has a different kind
        """
        if self._current.type is not token_type:
            raise self._syntax_error(
                f"expected {what or token_type.spelling}, found {self._current.describe()}"
            )
        return self._advance()

    def _syntax_error(self, message: str, token: Token | None = None) -> ParseError:
        """Build a ParseError located at ``token`` (default: the lookahead)."""
        loc = (token or self._current).location
        return ParseError(
            message,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=loc.source_file,
        )
