"""Recursive descent parser emitting HTML in a single pass.

Pulls tokens from the Lexer one at a time, checks them against the
grammar, and drives the Scope and DocumentBuilder as it goes. There is no
AST: when ``parse()`` returns, the document is already assembled.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Lookahead buffer and expectations
- `InlineParsingMixin`: Text, comments, bold, italics, line breaks
- `VariableParsingMixin`: Variable definition and lookup
- `BlockParsingMixin`: Program, head, paragraphs, lists, media

Error Handling:
Any lexical, syntax or semantic violation raises immediately and
abandons the builder, so a caller gets either a complete document or an
exception.

"""

from __future__ import annotations

from lolmark.config import CompileConfig, get_compile_config
from lolmark.document import DocumentBuilder
from lolmark.errors import LolmarkError
from lolmark.lexer import Lexer
from lolmark.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
    VariableParsingMixin,
)
from lolmark.scope import Scope
from lolmark.tokens import Token
from lolmark.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    VariableParsingMixin,
    BlockParsingMixin,
):
    """Single-pass lolmark compiler front end.

    Usage:
            >>> parser = Parser("#HAI hello #KTHXBYE")
            >>> print(parser.parse())
            <!doctype html>
            <html>
            <body>
            hello
            </body>
            </html>

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        compilation. Configuration is read from ContextVar once, when
        ``parse()`` starts.

    """

    __slots__ = (
        "_source_file",
        "_config",
        "_lexer",
        "_current",
        "_scope",
        "_doc",
        "_used",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Nothing is lexed until ``parse()`` is called.

        Args:
            source: lolmark source text
            source_file: Optional source file path for error messages
        """
        self._source_file = source_file
        self._lexer = Lexer(source, source_file)
        self._current: Token | None = None
        self._scope = Scope()
        self._config: CompileConfig = get_compile_config()
        self._doc = DocumentBuilder(self._config)
        self._used = False

    def parse(self) -> str:
        """Compile the source into an HTML document.

        Returns:
            The complete document string

        Raises:
            LexicalError: On a malformed or unknown tag
            ParseError: On a token out of grammatical order
            SemanticError: On a variable used without a visible definition
            LolmarkError: If this parser has already been used
        """
        if self._used:
            raise LolmarkError("Parser instances are single-use")
        self._used = True

        # One config snapshot for the grammar and the builder alike
        self._config = get_compile_config()
        self._doc = DocumentBuilder(self._config)

        logger.debug("Compiling %s", self._source_file or "<string>")
        self._current = self._lexer.next_token()
        self._parse_program()

        fragment_count = len(self._doc)
        html = self._doc.finish()
        logger.debug(
            "Compiled %s: %d fragments", self._source_file or "<string>", fragment_count
        )
        return html
