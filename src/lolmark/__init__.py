"""
lolmark: a LOLCODE-flavoured markup to HTML compiler

Compiles ``#HAI`` ... ``#KTHXBYE`` programs into a single well-formed
HTML5 document in one pass: a pull-based lexer feeds a recursive descent
parser that emits output as it recognizes the grammar.

Quick Start:
    >>> from lolmark import to_html
    >>> html = to_html("#HAI #MAEK PARAGRAF hai world #OIC #KTHXBYE")
    >>> print(html)
    <!doctype html>
    <html>
    <body>
    <p>
    hai
    world
    </p>
    </body>
    </html>

    >>> # Or keep a configured compiler around
    >>> from lolmark import CompileConfig, Compiler
    >>> compile_strict = Compiler(config=CompileConfig(strict_trailing=True))
    >>> html = compile_strict("#HAI #KTHXBYE")

Errors:
    LexicalError, ParseError and SemanticError (all LolmarkError) are raised
    at the first violation; no partial document is ever returned.
"""

from collections.abc import Iterable

from lolmark.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from lolmark.document import DocumentBuilder
from lolmark.errors import (
    DocumentError,
    LexicalError,
    LolmarkError,
    ParseError,
    ScopeError,
    SemanticError,
    SourceError,
)
from lolmark.lexer import Lexer
from lolmark.location import SourceLocation
from lolmark.parser import Parser
from lolmark.scope import Scope
from lolmark.tokens import Token, TokenType

__version__ = "0.1.0"


def to_html(source: str, *, source_file: str | None = None) -> str:
    """Compile lolmark source into an HTML document.

    Uses the compile configuration active in the current context.

    Args:
        source: lolmark source text
        source_file: Optional source file path for error messages

    Returns:
        The complete HTML document

    Raises:
        LolmarkError: On the first lexical, syntax or semantic error

    Example:
        >>> to_html("#HAI #LEMME SEE Y #MKAY #KTHXBYE")
        Traceback (most recent call last):
        ...
        lolmark.errors.SemanticError: 1:17 static semantic error: variable 'Y' used before definition
    """
    return Parser(source, source_file=source_file).parse()


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Lex ``source`` completely.

    Returns:
        All tokens up to and including EOF

    Raises:
        LexicalError: On a malformed or unknown tag
    """
    return list(Lexer(source, source_file).tokenize())


class Compiler:
    """Compiler bound to a fixed configuration.

    Usage:
        >>> compiler = Compiler(config=CompileConfig(fragment_separator=""))
        >>> compiler("#HAI #KTHXBYE")
        '<!doctype html><html><body></body></html>'

    Thread Safety:
        Uses ContextVar for context-local configuration. Safe to use multiple
        Compiler instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, config: CompileConfig | None = None) -> None:
        """Initialize compiler.

        Args:
            config: Compile configuration (defaults if None)
        """
        self._config = config or CompileConfig()

    @property
    def config(self) -> CompileConfig:
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Compile one source under this compiler's configuration.

        The previously active configuration is restored afterwards.
        """
        with compile_config_context(self._config):
            return Parser(source, source_file=source_file).parse()

    def compile_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[str]:
        """Compile several sources, setting the config once.

        Stops at the first error.
        """
        with compile_config_context(self._config):
            return [Parser(source, source_file=source_file).parse() for source in sources]


__all__ = [  # noqa: RUF022 (grouped by category for maintainability)
    # Version
    "__version__",
    # Core API
    "to_html",
    "tokenize",
    "Compiler",
    # Components
    "Lexer",
    "Parser",
    "Scope",
    "DocumentBuilder",
    # Tokens
    "Token",
    "TokenType",
    # Location
    "SourceLocation",
    # Configuration (ContextVar-based)
    "CompileConfig",
    "get_compile_config",
    "set_compile_config",
    "reset_compile_config",
    "compile_config_context",
    # Errors
    "LolmarkError",
    "SourceError",
    "LexicalError",
    "ParseError",
    "SemanticError",
    "ScopeError",
    "DocumentError",
]
