"""
Value parsing for the Fusion DSL.

Handles the right-hand side of assignments: strings, numbers, booleans,
null, embedded expressions and object names.
"""

import re
from typing import TYPE_CHECKING, Any

from .. import nodes
from ..lexer import LexMode, Token, TokenType
from .base import located

INTEGER_RE = re.compile(r"^[+-]?\d+$")
DECIMAL_RE = re.compile(r"^[+-]?\d+\.\d+$")

# Case-insensitive reserved words; these never become object names
KEYWORD_LITERALS: dict[str, bool | None] = {
    "true": True,
    "false": False,
    "null": None,
}


class ValueParserMixin:
    """
    Mixin providing value parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        advance: Any
        current_token: Any
        error_at: Any
        options: Any
        last_end: Any
        mark_start: Any

    @located
    def parse_value(self) -> nodes.Value:
        """
        Parse a value.

        Disambiguation order:
            1. quoted string     -> SimpleValue (never an object name)
            2. ${...}            -> Expression
            3. true/false/null   -> SimpleValue (any letter case)
            4. number            -> SimpleValue
            5. any other word    -> ObjectName
        """
        token = self.current_token(LexMode.VALUE)

        if token.type == TokenType.STRING:
            self.advance(LexMode.VALUE)
            # Escape sequences are kept as written
            return nodes.SimpleValue(data=token.raw)

        if token.type == TokenType.EXPRESSION:
            self.advance(LexMode.VALUE)
            return nodes.Expression(source=token.value)

        if token.type == TokenType.NAME:
            value = self._classify_word(token)
            self.advance(LexMode.VALUE)
            return value

        raise self.error_at(token, "a value")

    def _classify_word(self, token: Token) -> nodes.SimpleValue | nodes.ObjectName:
        """Turn a bare word into a literal or an object name reference."""
        text = token.value
        lowered = text.lower()

        if lowered in KEYWORD_LITERALS:
            return nodes.SimpleValue(data=KEYWORD_LITERALS[lowered])

        if INTEGER_RE.match(text):
            return nodes.SimpleValue(data=int(text))

        if DECIMAL_RE.match(text):
            return nodes.SimpleValue(data=float(text))

        # A leading '+' is only meaningful on numbers
        if text.startswith("+"):
            raise self.error_at(token, "a value")

        return nodes.ObjectName(name=text)
