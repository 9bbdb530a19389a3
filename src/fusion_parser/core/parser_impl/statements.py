"""
Statement parsing for the Fusion DSL.

Handles statement lists, include directives, definitions and nested blocks.
"""

from typing import TYPE_CHECKING, Any

from .. import nodes
from ..lexer import LexMode, TokenType
from .base import located

INCLUDE_KEYWORD = "include"
INCLUDE_PREFIX = INCLUDE_KEYWORD + ":"


class StatementParserMixin:
    """
    Mixin providing statement parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        advance: Any
        advance_within: Any
        current_token: Any
        peek_token: Any
        expect: Any
        match: Any
        error_at: Any
        options: Any
        last_end: Any
        mark_start: Any
        parse_path: Any
        parse_value: Any

    def parse_statement_list(self, closing: bool = False) -> list[nodes.Statement]:
        """
        Parse statements until end of input or, inside a block, the closing brace.

        Args:
            closing: True when parsing a block body; the '}' is left for the caller

        Raises:
            UnexpectedEndOfInputError: If a block body reaches end of input
            UnexpectedTokenError: If a '}' appears at top level
        """
        statements: list[nodes.Statement] = []

        while True:
            token = self.current_token()

            if token.type == TokenType.EOF:
                if closing:
                    raise self.error_at(token, "'}' to close block")
                return statements

            if token.type == TokenType.RBRACE:
                if closing:
                    return statements
                raise self.error_at(token, "a statement")

            statements.append(self.parse_statement())

    def parse_statement(self) -> nodes.Statement:
        """Parse one include directive or definition."""
        if self._at_include():
            return self.parse_include()
        return self.parse_definition()

    def _at_include(self) -> bool:
        token = self.current_token()
        if token.type != TokenType.IDENTIFIER:
            return False
        # ":" joins the next word when no space follows it (include:Foo.fusion)
        if token.value.startswith(INCLUDE_PREFIX):
            return True
        return token.value == INCLUDE_KEYWORD and self.peek_token().type == TokenType.COLON

    @located
    def parse_include(self) -> nodes.Include:
        """
        Parse include directive.

        Examples:
            include: Prototypes/*.fusion
            include: 'resource://Vendor.Site/Private/Fusion/Root.fusion'
            include:Foo.fusion
        """
        if self.current_token().value == INCLUDE_KEYWORD:
            self.advance()  # include
            self.expect(TokenType.COLON)
        else:
            self.advance_within(len(INCLUDE_PREFIX))

        token = self.current_token(LexMode.PATTERN)
        if token.type == TokenType.STRING:
            self.advance(LexMode.PATTERN)
            return nodes.Include(pattern=token.raw)
        if token.type == TokenType.PATTERN:
            self.advance(LexMode.PATTERN)
            return nodes.Include(pattern=token.value)

        raise self.error_at(token, "an include pattern")

    @located
    def parse_definition(self) -> nodes.Definition:
        """
        Parse definition: Path ["=" Value] [Block].

        Examples:
            foo.bar = "Test"
            prototype(Vendor.Site:Teaser) { ... }
            renderer = Neos.Fusion:Value { value = ${props.foo} }
        """
        path = self.parse_path()
        value = None
        block = None

        if self.match(TokenType.EQUALS):
            self.advance()
            value = self.parse_value()

        if self.match(TokenType.LBRACE):
            block = self.parse_block()

        return nodes.Definition(path=path, value=value, block=block)

    def parse_block(self) -> list[nodes.Statement]:
        """Parse a braced block of statements."""
        self.expect(TokenType.LBRACE)
        statements = self.parse_statement_list(closing=True)
        self.expect(TokenType.RBRACE, expected="'}' to close block")
        return statements
