"""Pull-based lexer for lolmark source.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (scanners + cursor navigation)
└── vocab.py             # Tag and keyword tables

Usage:
    >>> from lolmark.lexer import Lexer
    >>> lexer = Lexer("#HAI #KTHXBYE")
    >>> lexer.next_token()
    Token(HAI, 'HAI', 1:1)

"""

from lolmark.lexer.core import Lexer

__all__ = ["Lexer"]
