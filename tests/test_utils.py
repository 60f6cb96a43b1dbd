"""Tests for lolmark utility modules."""


class TestEscapeHtml:
    """Tests for escape_html function."""

    def test_special_characters(self) -> None:
        from lolmark.utils.text import escape_html

        assert escape_html("a&b") == "a&amp;b"
        assert escape_html("<tag>") == "&lt;tag&gt;"
        assert escape_html('"quoted"') == "&quot;quoted&quot;"
        assert escape_html("it's") == "it&#x27;s"

    def test_plain_text_unchanged(self) -> None:
        from lolmark.utils.text import escape_html

        assert escape_html("http://x.com/purr.mp3") == "http://x.com/purr.mp3"

    def test_empty(self) -> None:
        from lolmark.utils.text import escape_html

        assert escape_html("") == ""


class TestNormalizeNewlines:
    def test_each_break_becomes_space(self) -> None:
        from lolmark.utils.text import normalize_newlines

        assert normalize_newlines("a\nb") == "a b"
        assert normalize_newlines("a\r\nb") == "a  b"

    def test_no_breaks(self) -> None:
        from lolmark.utils.text import normalize_newlines

        assert normalize_newlines("red blue") == "red blue"


class TestLocation:
    def test_str_with_file(self) -> None:
        from lolmark.location import SourceLocation

        assert str(SourceLocation(3, 7, source_file="a.lol")) == "a.lol:3:7"

    def test_str_without_file(self) -> None:
        from lolmark.location import SourceLocation

        assert str(SourceLocation(3, 7)) == "3:7"
