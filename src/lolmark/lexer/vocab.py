"""Tag and keyword vocabulary for the lolmark lexer.

All lookups are made with the uppercased word. Tags are the words that
follow the ``#`` sigil; keywords are bare words matched case-insensitively.
"""

from __future__ import annotations

from lolmark.tokens import TokenType

TAG_SIGIL = "#"

# Whitespace skipped before every token
WHITESPACE = frozenset(" \t\n\r")

# Extra characters allowed inside a bare word (identifiers, URLs)
WORD_PUNCTUATION = frozenset(":./_")

# Single-word tags: "#HAI" etc.
SINGLE_WORD_TAGS: dict[str, TokenType] = {
    "HAI": TokenType.HAI,
    "KTHXBYE": TokenType.KTHXBYE,
    "OBTW": TokenType.OBTW,
    "TLDR": TokenType.TLDR,
    "MAEK": TokenType.MAEK,
    "OIC": TokenType.OIC,
    "GIMMEH": TokenType.GIMMEH,
    "MKAY": TokenType.MKAY,
}

# Two-word tags: lead word -> (required second word, token type)
TWO_WORD_TAGS: dict[str, tuple[str, TokenType]] = {
    "I": ("HAZ", TokenType.I_HAZ),
    "IT": ("IZ", TokenType.IT_IZ),
    "LEMME": ("SEE", TokenType.LEMME_SEE),
}

# Bare keywords
KEYWORDS: dict[str, TokenType] = {
    "HEAD": TokenType.HEAD,
    "TITLE": TokenType.TITLE,
    "PARAGRAF": TokenType.PARAGRAF,
    "BOLD": TokenType.BOLD,
    "ITALICS": TokenType.ITALICS,
    "LIST": TokenType.LIST,
    "ITEM": TokenType.ITEM,
    "NEWLINE": TokenType.NEWLINE,
    "SOUNDZ": TokenType.SOUNDZ,
    "VIDZ": TokenType.VIDZ,
}

# Every full spelling, as written in source (uppercased)
SPELLINGS = frozenset(
    [f"{TAG_SIGIL}{word}" for word in SINGLE_WORD_TAGS]
    + [f"{TAG_SIGIL}{lead} {second}" for lead, (second, _) in TWO_WORD_TAGS.items()]
    + list(KEYWORDS)
)


def upper_ascii(word: str) -> str:
    """Uppercase ASCII letters only.

    Non-ASCII letters keep their case so that no Unicode case folding
    can turn an ordinary word into a keyword.
    """
    if word.isascii():
        return word.upper()
    return "".join(c.upper() if c.isascii() else c for c in word)
