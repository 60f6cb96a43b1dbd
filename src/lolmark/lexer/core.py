"""Pull-based lexer for lolmark source.

The parser asks for one token at a time through ``next_token()``; there is
no up-front token list. Each call skips whitespace and then dispatches on
the first character:

- ``#``: a control tag (one or two words)
- a letter: a bare word, either a keyword or TEXT
- anything else: free text up to the next ``#``

Malformed input never produces a token. Unknown tags and broken two-word
tags raise LexicalError at the position of the sigil.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from lolmark.errors import LexicalError
from lolmark.lexer.vocab import (
    KEYWORDS,
    SINGLE_WORD_TAGS,
    SPELLINGS,
    TAG_SIGIL,
    TWO_WORD_TAGS,
    WHITESPACE,
    WORD_PUNCTUATION,
    upper_ascii,
)
from lolmark.tokens import Token, TokenType


class Lexer:
    """Character-cursor lexer producing one Token per call.

    Usage:
        >>> lexer = Lexer("#HAI hello #KTHXBYE")
        >>> for token in lexer.tokenize():
        ...     print(token)
        Token(HAI, 'HAI', 1:1)
        Token(TEXT, 'hello', 1:6)
        Token(KTHXBYE, 'KTHXBYE', 1:12)
        Token(EOF, '', 1:20)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_buf",  # Scratch buffer for the lexeme being read
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: lolmark source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._buf: list[str] = []

        self._saved_pos = 0
        self._saved_lineno = 1
        self._saved_col = 1

    # =========================================================================
    # Public interface
    # =========================================================================

    def next_token(self) -> Token:
        """Return the next token, skipping leading whitespace.

        Returns:
            The next Token; EOF once input is exhausted.

        Raises:
            LexicalError: On an unknown tag or a broken two-word tag.
        """
        self._skip_whitespace()
        self._save_location()

        char = self._peek()
        if not char:
            return self._make_token(TokenType.EOF, "")

        if char == TAG_SIGIL:
            return self._scan_tag()

        if char.isalpha():
            return self._scan_word()

        text = self._read_free_text()
        if not text:
            return self._make_token(TokenType.EOF, "")
        return self._make_token(TokenType.TEXT, text)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    @staticmethod
    def lookup(spelling: str) -> bool:
        """Whether ``spelling`` is part of the vocabulary.

        Tags are looked up with their sigil and a single space between
        words (``"#LEMME SEE"``); keywords without (``"vidz"``).
        """
        return " ".join(upper_ascii(spelling).split()) in SPELLINGS

    # =========================================================================
    # Scanners
    # =========================================================================

    def _scan_tag(self) -> Token:
        """Scan a tag starting at the ``#`` sigil."""
        self._advance()  # consume '#'
        lead = self._read_tag_word()

        if lead in TWO_WORD_TAGS:
            second, token_type = TWO_WORD_TAGS[lead]
            self._skip_whitespace()
            word = self._read_tag_word()
            if word != second:
                raise self._error(f"expected '{second}' after '{TAG_SIGIL}{lead}'")
            return self._make_token(token_type, f"{lead} {second}")

        token_type = SINGLE_WORD_TAGS.get(lead)
        if token_type is None:
            raise self._error(f"unknown tag '{TAG_SIGIL}{lead}'")
        return self._make_token(token_type, lead)

    def _scan_word(self) -> Token:
        """Scan a bare word: keyword, variable name, or URL-like text."""
        word = self._read_word()
        token_type = KEYWORDS.get(upper_ascii(word))
        if token_type is None:
            return self._make_token(TokenType.TEXT, word)
        return self._make_token(token_type, word)

    # =========================================================================
    # Lexeme readers
    # =========================================================================

    def _read_tag_word(self) -> str:
        """Read the alphabetic run after a sigil, uppercased."""
        self._buf.clear()
        while (char := self._peek()) and char.isalpha():
            self._buf.append(char)
            self._advance()
        return upper_ascii("".join(self._buf))

    def _read_word(self) -> str:
        """Read a maximal run of alphanumerics and ``: . / _``."""
        self._buf.clear()
        while (char := self._peek()) and (char.isalnum() or char in WORD_PUNCTUATION):
            self._buf.append(char)
            self._advance()
        return "".join(self._buf)

    def _read_free_text(self) -> str:
        """Read verbatim text up to the next sigil, preserving newlines."""
        self._buf.clear()
        while (char := self._peek()) and char != TAG_SIGIL:
            self._buf.append(char)
            self._advance()
        return "".join(self._buf).strip()

    # =========================================================================
    # Character navigation
    # =========================================================================

    def _peek(self) -> str:
        """Current character, or empty string at end of input."""
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _advance(self) -> str:
        """Consume one character, updating line/column tracking."""
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _skip_whitespace(self) -> None:
        while self._pos < self._source_len and self._source[self._pos] in WHITESPACE:
            self._advance()

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Remember where the current lexeme starts."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _offset=self._saved_pos,
            _source_file=self._source_file,
        )

    def _error(self, message: str) -> LexicalError:
        return LexicalError(
            message,
            lineno=self._saved_lineno,
            col_offset=self._saved_col,
            source_file=self._source_file,
        )
