"""Exception classes for lolmark.

Every failure inside the compiler surfaces as a LolmarkError subclass and
propagates to the single entry point that started the compilation. No
partial document is ever returned alongside an error.
"""

from __future__ import annotations


class LolmarkError(Exception):
    """Base exception for all lolmark errors.

    Subclass this for specific error categories.
    """

    pass


class SourceError(LolmarkError):
    """Error tied to a position in the source text.

    Base for the three user-facing error kinds (lexical, syntax, semantic).
    """

    kind = "error"

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize source error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{self.kind}: {message}")


class LexicalError(SourceError):
    """Malformed or unrecognized tag / word sequence."""

    kind = "lexical error"


class ParseError(SourceError):
    """Token sequence violates the grammar at the current position."""

    kind = "syntax error"


class SemanticError(SourceError):
    """Variable referenced without a visible definition."""

    kind = "static semantic error"

    def __init__(
        self,
        name: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize semantic error for an unresolved variable.

        Args:
            name: The variable name that failed to resolve
            lineno: Line number of the reference
            col_offset: Column offset of the reference
            source_file: Path to source file (optional)
        """
        self.name = name
        super().__init__(
            f"variable '{name}' used before definition",
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )


class ScopeError(LolmarkError):
    """Attempt to pop the global scope frame."""

    pass


class DocumentError(LolmarkError):
    """DocumentBuilder used out of order.

    Raised when head is opened after body, or when a finished builder
    is mutated again.
    """

    pass
