"""Tests for library logging."""

import logging

import pytest

from lolmark import to_html
from lolmark.utils.logger import get_logger


class TestGetLogger:
    def test_prefixes_bare_names(self) -> None:
        assert get_logger("mymodule").name == "lolmark.mymodule"

    def test_relative_module_name(self) -> None:
        assert get_logger("parsing.blocks").name == "lolmark.parsing.blocks"

    def test_keeps_package_names(self) -> None:
        assert get_logger("lolmark.parser").name == "lolmark.parser"
        assert get_logger("lolmark").name == "lolmark"


class TestCompilerLogging:
    def test_stray_title_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="lolmark"):
            to_html("#HAI #GIMMEH TITLE lost #MKAY #KTHXBYE")
        records = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(records) == 1
        assert records[0].name == "lolmark.parsing.blocks"
        assert "Ignoring #GIMMEH TITLE" in records[0].getMessage()
        assert "'lost'" in records[0].getMessage()

    def test_clean_compile_is_quiet(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="lolmark"):
            to_html("#HAI #MAEK HEAD #GIMMEH TITLE t #MKAY #OIC #KTHXBYE")
        assert caplog.records == []

    def test_debug_trace(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="lolmark"):
            to_html("#HAI #MAEK PARAGRAF a #OIC #KTHXBYE", source_file="page.lol")
        messages = [r.getMessage() for r in caplog.records]
        assert "Compiling page.lol" in messages
        assert "Entered paragraph scope (depth 1)" in messages
