"""
Base parser class for the Fusion DSL.

Provides the token manipulation, error generation and location tracking
used by all parser mixins.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel

from ..errors import ParseError, make_unexpected_eof_error, make_unexpected_token_error
from ..lexer import Lexer, LexMode, Token, TokenType
from ..nodes import SourceLocation, SourcePosition
from ..options import ParseOptions

NodeT = TypeVar("NodeT", bound=BaseModel)

# Tokens that read the same whatever word alphabet is active
MODE_INDEPENDENT_TYPES = frozenset({TokenType.STRING, TokenType.EXPRESSION, TokenType.EOF})


def located(rule: Callable[..., NodeT]) -> Callable[..., NodeT]:
    """
    Attach a SourceLocation to the node built by a grammar rule.

    The start is the first significant character the rule sees, the end is
    just past the last token it consumed. With ``add_location`` disabled the
    rule is called directly.
    """

    @functools.wraps(rule)
    def wrapper(self: "BaseParser", *args: Any, **kwargs: Any) -> NodeT:
        if not self.options.add_location:
            return rule(self, *args, **kwargs)

        start = self.mark_start()
        node = rule(self, *args, **kwargs)
        loc = SourceLocation(start=start, end=self.last_end)
        return node.model_copy(update={"loc": loc})

    return wrapper


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    This class provides the foundation for recursive descent parsing:
    one buffered lookahead token, a second token of peek, matching, and
    error generation. Tokens are pulled from the lexer on demand.
    """

    def __init__(self, lexer: Lexer, options: ParseOptions | None = None):
        """
        Initialize parser.

        Args:
            lexer: Lexer over the source text
            options: Parse options (defaults when omitted)
        """
        self.lexer = lexer
        self.file = lexer.file
        self.options = options or ParseOptions()
        self.last_end = SourcePosition(line=1, column=1)
        self._lookahead: Token | None = None
        self._lookahead_mode: LexMode | None = None

    def current_token(self, mode: LexMode = LexMode.PATH) -> Token:
        """
        Get current token, scanned with the given word alphabet.

        A buffered token scanned in another mode is re-read from its start.
        """
        token = self._lookahead
        if token is not None:
            if self._lookahead_mode == mode or token.type in MODE_INDEPENDENT_TYPES:
                return token
            self.lexer.rewind(token)

        self._lookahead = self.lexer.next_token(mode)
        self._lookahead_mode = mode
        return self._lookahead

    def peek_token(self, mode: LexMode = LexMode.PATH) -> Token:
        """Peek at the token after the current one without consuming either."""
        self.current_token(self._lookahead_mode or LexMode.PATH)
        saved = (self.lexer.pos, self.lexer.line, self.lexer.column)
        try:
            return self.lexer.next_token(mode)
        finally:
            self.lexer.pos, self.lexer.line, self.lexer.column = saved

    def advance(self, mode: LexMode = LexMode.PATH) -> Token:
        """Consume and return current token."""
        token = self.current_token(mode)
        if token.type != TokenType.EOF:
            self._lookahead = None
            self._lookahead_mode = None
            self.last_end = SourcePosition(line=token.end_line, column=token.end_column)
        return token

    def expect(
        self,
        token_type: TokenType,
        mode: LexMode = LexMode.PATH,
        expected: str | None = None,
    ) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            UnexpectedTokenError: If token doesn't match
            UnexpectedEndOfInputError: If input ends first
        """
        token = self.current_token(mode)
        if token.type != token_type:
            raise self.error_at(token, expected or f"'{token_type.value}'")
        return self.advance(mode)

    def advance_within(self, length: int) -> None:
        """Consume only the first ``length`` characters of the current word token."""
        token = self.current_token(self._lookahead_mode or LexMode.PATH)
        self.lexer.resume_inside(token, length)
        self._lookahead = None
        self._lookahead_mode = None
        self.last_end = SourcePosition(line=token.line, column=token.column + length)

    def match(self, *token_types: TokenType, mode: LexMode = LexMode.PATH) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token(mode).type in token_types

    def mark_start(self) -> SourcePosition:
        """Position of the next significant character."""
        if self._lookahead is not None:
            return SourcePosition(line=self._lookahead.line, column=self._lookahead.column)
        self.lexer.skip_trivia()
        return SourcePosition(line=self.lexer.line, column=self.lexer.column)

    def error_at(self, token: Token, expected: str) -> ParseError:
        """Build the error for finding ``token`` where ``expected`` was required."""
        source = self.lexer.text if self.options.include_snippet else None
        if token.type == TokenType.EOF:
            return make_unexpected_eof_error(expected, self.file, token.line, token.column, source)
        return make_unexpected_token_error(
            expected,
            token.describe(),
            self.file,
            token.line,
            token.column,
            source,
        )
