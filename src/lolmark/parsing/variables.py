"""Variable definition and use for the lolmark parser.

``#I HAZ name #IT IZ value #MKAY`` binds ``name`` in the innermost scope
frame. ``#LEMME SEE name #MKAY`` emits the nearest binding verbatim, or
fails with a SemanticError when no enclosing frame defines the name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lolmark.errors import SemanticError
from lolmark.tokens import TokenType

if TYPE_CHECKING:
    from lolmark.document import DocumentBuilder
    from lolmark.scope import Scope


class VariableParsingMixin:
    """Mixin for variable definition and lookup.

    Required Host Attributes:
        - _doc: DocumentBuilder
        - _scope: Scope

    Required Host Methods:
        - _expect(token_type, what=None) -> Token
        - _parse_text_run(context) -> str

    """

    _doc: DocumentBuilder
    _scope: Scope

    def _parse_variable_define(self) -> None:
        self._expect(TokenType.I_HAZ)
        name = self._expect(TokenType.TEXT, "variable name after #I HAZ").value
        self._expect(TokenType.IT_IZ)
        value = self._parse_text_run(f"the value of '{name}'")
        self._scope.define(name, value)

    def _parse_variable_use(self) -> None:
        self._expect(TokenType.LEMME_SEE)
        name_token = self._expect(TokenType.TEXT, "variable name after #LEMME SEE")
        self._expect(TokenType.MKAY)

        value = self._scope.resolve(name_token.value)
        if value is None:
            loc = name_token.location
            raise SemanticError(
                name_token.value,
                lineno=loc.lineno,
                col_offset=loc.col_offset,
                source_file=loc.source_file,
            )
        self._doc.raw(value)
