"""
Path parsing for the Fusion DSL.

Handles dotted paths, quoted segments, meta-properties and
``prototype(Name)`` segments.
"""

from typing import TYPE_CHECKING, Any

from .. import nodes
from ..lexer import LexMode, TokenType
from .base import located

PROTOTYPE_KEYWORD = "prototype"


class PathParserMixin:
    """
    Mixin providing path parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        advance: Any
        current_token: Any
        peek_token: Any
        expect: Any
        match: Any
        error_at: Any
        options: Any
        last_end: Any
        mark_start: Any

    def parse_path(self) -> list[nodes.PathSegment]:
        """
        Parse a path into its segments.

        Examples:
            foo.bar                      -> [foo, bar]
            'quoted'.@process            -> [quoted, @process]
            prototype(Vendor:Page).body  -> [prototype(Vendor:Page), body]
        """
        segments = [self.parse_path_segment()]

        while self.match(TokenType.DOT):
            self.advance()
            segments.append(self.parse_path_segment())

        return segments

    @located
    def parse_path_segment(self) -> nodes.PathSegment:
        """Parse a single path segment."""
        token = self.current_token()

        if token.type == TokenType.IDENTIFIER:
            if token.value == PROTOTYPE_KEYWORD and self.peek_token().type == TokenType.LPAREN:
                return self._parse_prototype_segment()
            self.advance()
            return nodes.PropertySegment(name=token.value)

        # Quoted segments are unescaped
        if token.type == TokenType.STRING:
            self.advance()
            return nodes.PropertySegment(name=token.value)

        raise self.error_at(token, "a path segment")

    def _parse_prototype_segment(self) -> nodes.PrototypeSegment:
        """Parse prototype(Vendor.Package:Object.Name)."""
        self.advance()  # prototype
        self.expect(TokenType.LPAREN)
        name = self.expect(TokenType.NAME, mode=LexMode.NAME, expected="a prototype name").value
        self.expect(TokenType.RPAREN, expected="')' after prototype name")
        return nodes.PrototypeSegment(name=name)
