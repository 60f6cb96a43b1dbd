"""Parsing subsystem for the lolmark parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: One-token lookahead over the lexer
- `InlineParsingMixin`: Text runs, comments, bold, italics, line breaks
- `VariableParsingMixin`: ``#I HAZ`` definitions and ``#LEMME SEE`` uses
- `BlockParsingMixin`: Program skeleton, head, paragraphs, lists, media

Architecture:
Each mixin owns one part of the grammar. Recognition and emission are the
same step: every routine drives the DocumentBuilder and Scope as it
consumes tokens, so there is no intermediate tree.

Example:
    >>> from lolmark.parsing import (
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     VariableParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(
    ...     TokenNavigationMixin, InlineParsingMixin, VariableParsingMixin, BlockParsingMixin
    ... ):
    ...     pass

"""

from lolmark.parsing.blocks import BlockParsingMixin
from lolmark.parsing.inline import InlineParsingMixin
from lolmark.parsing.token_nav import TokenNavigationMixin
from lolmark.parsing.variables import VariableParsingMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "VariableParsingMixin",
    "BlockParsingMixin",
]
