"""Block parsing for the lolmark parser.

Provides the program skeleton and the body-level constructs: head and
title, paragraphs, lists, and media embeds.

Grammar (one routine per nonterminal):

    program   := HAI comment* head? body-item* KTHXBYE
    head      := MAEK HEAD title-decl OIC
    title-decl:= GIMMEH TITLE text-run
    body-item := MAEK (paragraph | list)
               | GIMMEH (newline | bold | italics | audio | video | title)
               | var-define | var-use | TEXT | comment | MKAY
    paragraph := PARAGRAF var-define? inner-text* OIC
    list      := LIST (GIMMEH ITEM inline-run | GIMMEH NEWLINE MKAY | comment)* OIC

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lolmark.tokens import TokenType
from lolmark.utils.logger import get_logger
from lolmark.utils.text import escape_html

if TYPE_CHECKING:
    from lolmark.config import CompileConfig
    from lolmark.document import DocumentBuilder
    from lolmark.scope import Scope

logger = get_logger(__name__)


class BlockParsingMixin:
    """Mixin for program structure and body-level constructs.

    Required Host Attributes:
        - _doc: DocumentBuilder
        - _scope: Scope
        - _config: CompileConfig

    Required Host Methods:
        - _at(*types) -> bool
        - _advance() -> Token
        - _expect(token_type, what=None) -> Token
        - _syntax_error(message, token=None) -> ParseError
        - _parse_text_run(context) -> str
        - _parse_comment() -> None
        - _parse_text() -> None
        - _parse_bold() / _parse_italics() / _parse_newline() -> None
        - _parse_gimmeh_inline(context) -> None
        - _parse_inline_run(context) -> None
        - _parse_variable_define() / _parse_variable_use() -> None

    """

    _doc: DocumentBuilder
    _scope: Scope
    _config: CompileConfig

    # =========================================================================
    # Program skeleton
    # =========================================================================

    def _parse_program(self) -> None:
        self._doc.begin_document()
        self._expect(TokenType.HAI)

        while self._at(TokenType.OBTW):
            self._parse_comment()

        # #MAEK is already consumed when HEAD vs PARAGRAF/LIST is decided
        maek_pending = False
        if self._at(TokenType.MAEK):
            self._advance()
            if self._at(TokenType.HEAD):
                self._parse_head()
            else:
                maek_pending = True

        self._doc.begin_body()
        if maek_pending:
            self._parse_maek_body()

        while not self._at(TokenType.KTHXBYE, TokenType.EOF):
            self._parse_body_item()

        self._expect(TokenType.KTHXBYE)
        self._doc.end_body()
        self._check_trailing()

    def _check_trailing(self) -> None:
        """Handle whatever follows ``#KTHXBYE``."""
        if self._at_end():
            return
        if self._config.strict_trailing:
            raise self._syntax_error(
                f"unexpected {self._current.describe()} after #KTHXBYE"
            )
        logger.debug("Ignoring content after #KTHXBYE at %s", self._current.location)

    def _parse_head(self) -> None:
        # #MAEK already consumed
        self._expect(TokenType.HEAD)
        self._doc.begin_head()
        self._parse_title()
        self._expect(TokenType.OIC)
        self._doc.end_head()

    def _parse_title(self) -> None:
        self._expect(TokenType.GIMMEH)
        self._expect(TokenType.TITLE)
        self._doc.title(self._parse_text_run("TITLE"))

    # =========================================================================
    # Body
    # =========================================================================

    def _parse_body_item(self) -> None:
        """Parse a single body-level construct."""
        match self._current.type:
            case TokenType.MAEK:
                self._advance()
                self._parse_maek_body()

            case TokenType.GIMMEH:
                self._advance()
                self._parse_gimmeh_body()

            case TokenType.I_HAZ:
                self._parse_variable_define()

            case TokenType.LEMME_SEE:
                self._parse_variable_use()

            case TokenType.TEXT:
                self._parse_text()

            case TokenType.OBTW:
                self._parse_comment()

            case TokenType.MKAY:
                self._skip_stray_mkay("body")

            case _:
                raise self._syntax_error(f"unexpected {self._current.describe()} in body")

    def _parse_maek_body(self) -> None:
        """Dispatch on the keyword after a body-level ``#MAEK``."""
        match self._current.type:
            case TokenType.PARAGRAF:
                self._parse_paragraph()
            case TokenType.LIST:
                self._parse_list()
            case _:
                raise self._syntax_error(
                    f"expected PARAGRAF or LIST after #MAEK, found {self._current.describe()}"
                )

    def _parse_gimmeh_body(self) -> None:
        """Dispatch on the keyword after a body-level ``#GIMMEH``."""
        match self._current.type:
            case TokenType.NEWLINE:
                self._parse_newline()
            case TokenType.BOLD:
                self._parse_bold()
            case TokenType.ITALICS:
                self._parse_italics()
            case TokenType.SOUNDZ:
                self._parse_audio()
            case TokenType.VIDZ:
                self._parse_video()
            case TokenType.TITLE:
                self._skip_stray_title()
            case _:
                raise self._syntax_error(
                    f"unsupported #GIMMEH construct in body: {self._current.describe()}"
                )

    def _skip_stray_title(self) -> None:
        """Consume a title declared outside the head; nothing is emitted."""
        token = self._expect(TokenType.TITLE)
        text = self._parse_text_run("TITLE")
        logger.warning(
            "Ignoring #GIMMEH TITLE outside #MAEK HEAD at %s: %r", token.location, text
        )

    def _skip_stray_mkay(self, context: str) -> None:
        if not self._config.tolerate_stray_mkay:
            raise self._syntax_error(f"unexpected #MKAY in {context}")
        self._advance()

    # =========================================================================
    # Paragraphs
    # =========================================================================

    def _parse_paragraph(self) -> None:
        """Parse a paragraph inside its own scope frame."""
        self._expect(TokenType.PARAGRAF)

        with self._scope.frame():
            logger.debug("Entered paragraph scope (depth %d)", self._scope.depth())
            self._doc.begin_paragraph()

            if self._at(TokenType.I_HAZ):
                self._parse_variable_define()

            while not self._at(TokenType.OIC, TokenType.EOF):
                self._parse_inner_text()

            self._expect(TokenType.OIC)
            self._doc.end_paragraph()

    def _parse_inner_text(self) -> None:
        match self._current.type:
            case TokenType.GIMMEH:
                self._parse_gimmeh_inline("PARAGRAF")
            case TokenType.LEMME_SEE:
                self._parse_variable_use()
            case TokenType.TEXT:
                self._parse_text()
            case TokenType.OBTW:
                self._parse_comment()
            case TokenType.MKAY:
                self._skip_stray_mkay("PARAGRAF")
            case _:
                raise self._syntax_error(
                    f"unexpected {self._current.describe()} in PARAGRAF"
                )

    # =========================================================================
    # Lists
    # =========================================================================

    def _parse_list(self) -> None:
        self._expect(TokenType.LIST)
        self._doc.raw("<ul>")

        while True:
            match self._current.type:
                case TokenType.GIMMEH:
                    self._advance()
                    match self._current.type:
                        case TokenType.ITEM:
                            self._parse_list_item()
                        case TokenType.NEWLINE:
                            self._parse_newline()
                        case _:
                            raise self._syntax_error(
                                "expected ITEM or NEWLINE after #GIMMEH in LIST, "
                                f"found {self._current.describe()}"
                            )
                case TokenType.OBTW:
                    self._parse_comment()
                case TokenType.OIC:
                    self._advance()
                    break
                case TokenType.EOF:
                    raise self._syntax_error("unexpected end of input inside LIST")
                case _:
                    raise self._syntax_error(
                        f"unexpected {self._current.describe()} in LIST"
                    )

        self._doc.raw("</ul>")

    def _parse_list_item(self) -> None:
        self._expect(TokenType.ITEM)
        self._doc.raw("<li>")
        self._parse_inline_run("ITEM")
        self._doc.raw("</li>")

    # =========================================================================
    # Media
    # =========================================================================

    def _parse_audio(self) -> None:
        self._expect(TokenType.SOUNDZ)
        src = escape_html(self._parse_text_run("SOUNDZ").strip())
        self._doc.raw(f'<audio controls><source src="{src}" /></audio>')

    def _parse_video(self) -> None:
        self._expect(TokenType.VIDZ)
        src = escape_html(self._parse_text_run("VIDZ").strip())
        self._doc.raw(f'<iframe src="{src}" allowfullscreen loading="lazy"></iframe>')
