"""Token and TokenType definitions for the lolmark lexer.

The lexer produces Token objects one at a time; the parser holds exactly
one of them in its lookahead slot. Grammar matching compares ``type``
only. The ``value`` of a TEXT token is read contextually (variable names,
title text, media sources) and never matched for equality.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from lolmark.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Control tags (``#`` sigil, one or two words)
    - Bare keywords
    - Free text and end of input

    """

    # Control tags - single word
    HAI = auto()  # #HAI
    KTHXBYE = auto()  # #KTHXBYE
    OBTW = auto()  # #OBTW
    TLDR = auto()  # #TLDR
    MAEK = auto()  # #MAEK
    OIC = auto()  # #OIC
    GIMMEH = auto()  # #GIMMEH
    MKAY = auto()  # #MKAY

    # Control tags - two words
    I_HAZ = auto()  # #I HAZ
    IT_IZ = auto()  # #IT IZ
    LEMME_SEE = auto()  # #LEMME SEE

    # Bare keywords
    HEAD = auto()
    TITLE = auto()
    PARAGRAF = auto()
    BOLD = auto()
    ITALICS = auto()
    LIST = auto()
    ITEM = auto()
    NEWLINE = auto()
    SOUNDZ = auto()
    VIDZ = auto()

    # Payload and end marker
    TEXT = auto()
    EOF = auto()

    @property
    def is_tag(self) -> bool:
        """Whether this type is spelled with the ``#`` sigil."""
        return self in TAG_TYPES

    @property
    def spelling(self) -> str:
        """Source spelling used in error messages (``#I HAZ``, ``TITLE``)."""
        if self is TokenType.TEXT:
            return "text"
        if self is TokenType.EOF:
            return "end of input"
        word = self.name.replace("_", " ")
        return f"#{word}" if self.is_tag else word


TAG_TYPES = frozenset(
    {
        TokenType.HAI,
        TokenType.KTHXBYE,
        TokenType.OBTW,
        TokenType.TLDR,
        TokenType.MAEK,
        TokenType.OIC,
        TokenType.GIMMEH,
        TokenType.MKAY,
        TokenType.I_HAZ,
        TokenType.IT_IZ,
        TokenType.LEMME_SEE,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Original-case text for TEXT tokens, the matched spelling otherwise
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _offset: Absolute start position in source
        _source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.
        Most tokens are consumed without their location ever being read.

    """

    type: TokenType
    value: str
    _lineno: int = 1
    _col: int = 1
    _offset: int = 0
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    def describe(self) -> str:
        """Human-readable form for error messages."""
        if self.type is TokenType.TEXT:
            val = self.value
            if len(val) > 20:
                val = val[:17] + "..."
            return f"text {val!r}"
        return self.type.spelling

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"
