"""Property-based tests for the compiler using Hypothesis.

Whatever the input, compilation either raises a LolmarkError or returns
one complete document with exactly one body.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from lolmark import LolmarkError, to_html

FRAGMENTS = [
    "#MAEK PARAGRAF",
    "#MAEK LIST",
    "#MAEK HEAD",
    "#OIC",
    "#GIMMEH BOLD",
    "#GIMMEH ITALICS",
    "#GIMMEH NEWLINE",
    "#GIMMEH ITEM",
    "#GIMMEH TITLE",
    "#GIMMEH SOUNDZ",
    "#MKAY",
    "#OBTW",
    "#TLDR",
    "#I HAZ X #IT IZ",
    "#LEMME SEE X",
    "kitteh",
    "9 lives",
    "<&>",
]


def _compile_or_none(source: str) -> str | None:
    try:
        return to_html(source)
    except LolmarkError:
        return None


def _assert_well_formed(html: str) -> None:
    assert html.startswith("<!doctype html>\n<html>")
    assert html.endswith("</html>")
    assert html.count("<body>") == 1
    assert html.count("</body>") == 1
    assert html.index("<body>") < html.index("</body>")


class TestDocumentShape:
    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_arbitrary_text(self, source: str) -> None:
        html = _compile_or_none(source)
        if html is not None:
            _assert_well_formed(html)

    @given(st.lists(st.sampled_from(FRAGMENTS), max_size=30))
    @settings(max_examples=300)
    def test_vocabulary_programs(self, fragments: list[str]) -> None:
        source = "#HAI " + " ".join(fragments) + " #KTHXBYE"
        html = _compile_or_none(source)
        if html is not None:
            _assert_well_formed(html)
            assert html.count("<p>") == html.count("</p>")
            assert html.count("<ul>") == html.count("</ul>")


class TestDeterminism:
    @given(st.lists(st.sampled_from(FRAGMENTS), max_size=30))
    @settings(max_examples=100)
    def test_same_input_same_output(self, fragments: list[str]) -> None:
        source = "#HAI " + " ".join(fragments) + " #KTHXBYE"
        assert _compile_or_none(source) == _compile_or_none(source)
