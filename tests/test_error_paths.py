"""Tests for error reporting: hierarchy, formatting and locations.

Every lexical, syntax and semantic violation must abort compilation with
the right error kind at the position of the offending token.
"""

import pytest

from lolmark import to_html
from lolmark.errors import (
    DocumentError,
    LexicalError,
    LolmarkError,
    ParseError,
    ScopeError,
    SemanticError,
    SourceError,
)


class TestHierarchy:
    @pytest.mark.parametrize("error_cls", [LexicalError, ParseError, SemanticError])
    def test_source_errors(self, error_cls: type) -> None:
        assert issubclass(error_cls, SourceError)
        assert issubclass(error_cls, LolmarkError)

    @pytest.mark.parametrize("error_cls", [ScopeError, DocumentError])
    def test_internal_errors(self, error_cls: type) -> None:
        assert issubclass(error_cls, LolmarkError)
        assert not issubclass(error_cls, SourceError)


class TestFormatting:
    """``str(error)`` reads ``file:line:col kind: message``."""

    def test_full_location(self) -> None:
        err = ParseError("expected #OIC", lineno=3, col_offset=7, source_file="a.lol")
        assert str(err) == "a.lol:3:7 syntax error: expected #OIC"

    def test_without_file(self) -> None:
        err = LexicalError("unknown tag '#WUT'", lineno=1, col_offset=6)
        assert str(err) == "1:6 lexical error: unknown tag '#WUT'"

    def test_without_location(self) -> None:
        assert str(ParseError("oops")) == "syntax error: oops"

    def test_semantic_error_message(self) -> None:
        err = SemanticError("X", lineno=2, col_offset=12)
        assert err.name == "X"
        assert err.message == "variable 'X' used before definition"
        assert str(err) == "2:12 static semantic error: variable 'X' used before definition"


class TestSyntaxErrors:
    """Grammar violations raise ParseError."""

    @pytest.mark.parametrize(
        ("source", "fragment"),
        [
            ("", "expected #HAI, found end of input"),
            ("hello", "expected #HAI, found text 'hello'"),
            ("#HAI hello", "expected #KTHXBYE"),
            ("#HAI\u00a0#KTHXBYE", "expected #KTHXBYE, found end of input"),
            ("#HAI #MAEK PARAGRAF a #OIC #MAEK HEAD", "expected PARAGRAF or LIST after #MAEK, found HEAD"),
            ("#HAI #MAEK HEAD #OIC #KTHXBYE", "expected #GIMMEH"),
            ("#HAI #MAEK HEAD #GIMMEH TITLE t #MKAY #KTHXBYE", "expected #OIC"),
            ("#HAI #I HAZ #IT IZ v #MKAY #KTHXBYE", "expected variable name after #I HAZ"),
            ("#HAI #I HAZ X v #MKAY #KTHXBYE", "expected #IT IZ"),
            ("#HAI #GIMMEH BOLD a #GIMMEH #MKAY #KTHXBYE", "only text is allowed before #MKAY in BOLD"),
            ("#HAI #GIMMEH NEWLINE #KTHXBYE", "expected #MKAY"),
            ("#HAI #MAEK PARAGRAF a #I HAZ X #IT IZ v #MKAY #OIC #KTHXBYE", "unexpected #I HAZ in PARAGRAF"),
            ("#HAI #MAEK PARAGRAF a", "expected #OIC"),
            ("#HAI #GIMMEH ITEM a #MKAY #KTHXBYE", "unsupported #GIMMEH construct in body"),
            ("#HAI #OBTW a #MKAY #TLDR #KTHXBYE", "only text is allowed inside #OBTW"),
            ("#HAI #OIC #KTHXBYE", "unexpected #OIC in body"),
        ],
    )
    def test_parse_error(self, source: str, fragment: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            to_html(source)
        assert fragment in str(exc_info.value)

    def test_location_is_offending_token(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            to_html("#HAI\n  #OIC")
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (2, 3)

    def test_missing_kthxbye_points_past_end(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            to_html("#HAI", source_file="page.lol")
        assert str(exc_info.value).startswith("page.lol:1:5 syntax error:")


class TestLexicalErrors:
    @pytest.mark.parametrize("source", ["#HAI #WUT #KTHXBYE", "#HAI #I HAS X #KTHXBYE", "#HAI # #KTHXBYE"])
    def test_lexical_error(self, source: str) -> None:
        with pytest.raises(LexicalError):
            to_html(source)

    def test_lexical_error_after_kthxbye(self) -> None:
        """The token after #KTHXBYE is still lexed."""
        with pytest.raises(LexicalError):
            to_html("#HAI #KTHXBYE #WUT")


class TestSemanticErrors:
    def test_location_is_variable_name(self) -> None:
        with pytest.raises(SemanticError) as exc_info:
            to_html("#HAI\n#LEMME SEE Y #MKAY\n#KTHXBYE", source_file="vars.lol")
        err = exc_info.value
        assert (err.lineno, err.col_offset) == (2, 12)
        assert err.source_file == "vars.lol"

    def test_no_partial_output(self) -> None:
        """An error after valid content still raises rather than returning."""
        with pytest.raises(SemanticError):
            to_html("#HAI #MAEK PARAGRAF fine #OIC #LEMME SEE missing #MKAY #KTHXBYE")
