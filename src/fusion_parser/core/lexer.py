"""
Lexer/Tokenizer for the Fusion DSL.

Converts raw Fusion text into significant tokens with source location
tracking. Whitespace and the three comment forms (``//``, ``#`` and
``/* ... */``) are skipped.

Tokens are produced on demand. The word alphabet depends on where the
grammar engine is: a ``.`` separates path segments but belongs to object
names such as ``Neos.Fusion:Value``, so the parser passes a ``LexMode`` with
every request and rewinds a buffered token when it needs a different mode.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import (
    make_unexpected_token_error,
    make_unterminated_expression_error,
    make_unterminated_literal_error,
)


class TokenType(Enum):
    """Token types in the Fusion DSL."""

    # Words
    IDENTIFIER = "identifier"  # Path segment word: foo, @process, 1, xlink:href
    NAME = "name"  # Value/prototype word: Neos.Fusion:Value, 42, TRUE
    PATTERN = "pattern"  # Bare include pattern: Prototypes/*.fusion

    # Literals
    STRING = "string"
    EXPRESSION = "expression"

    # Symbols
    EQUALS = "="
    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    DOT = "."
    COLON = ":"
    COMMA = ","

    # Special
    EOF = "end of input"


class LexMode(Enum):
    """Which word alphabet the scanner applies."""

    PATH = "path"  # letters, digits, @ _ - :
    VALUE = "value"  # PATH plus . : and a leading +
    NAME = "name"  # PATH plus . : (inside prototype(...))
    PATTERN = "pattern"  # any run of non-whitespace characters


SYMBOLS = {
    "=": TokenType.EQUALS,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ".": TokenType.DOT,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

QUOTES = ("'", '"')

WORD_PUNCTUATION = {
    LexMode.PATH: frozenset("@_-:"),
    LexMode.VALUE: frozenset("@_-.:"),
    LexMode.NAME: frozenset("@_-.:"),
}

WORD_MODES = {
    LexMode.PATH: TokenType.IDENTIFIER,
    LexMode.VALUE: TokenType.NAME,
    LexMode.NAME: TokenType.NAME,
}

# Characters ending a bare include pattern besides whitespace and comments
PATTERN_TERMINATORS = frozenset("{}")

# Word punctuation that only joins two word parts, never ends a word
JOINERS = frozenset(".:")


@dataclass
class Token:
    """
    A single token in the DSL.

    Attributes:
        type: Type of token
        value: Token text (unescaped for strings, inner source for expressions)
        line: Line number of the first character (1-indexed)
        column: Column number of the first character (1-indexed)
        pos: Offset of the first character
        end_line: Line just past the last character
        end_column: Column just past the last character
        raw: String body exactly as written (strings only)
    """

    type: TokenType
    value: str
    line: int
    column: int
    pos: int = 0
    end_line: int = 0
    end_column: int = 0
    raw: str | None = None

    def describe(self) -> str:
        """Human-readable description used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        if self.type == TokenType.STRING:
            return f"string {self.value!r}"
        if self.type == TokenType.EXPRESSION:
            return "expression"
        if self.type in (TokenType.IDENTIFIER, TokenType.NAME, TokenType.PATTERN):
            return f"{self.value!r}"
        return f"'{self.type.value}'"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for the Fusion DSL.

    Scans source text one token at a time, keeping a running line/column
    counter that is the sole source of location data.
    """

    def __init__(self, text: str, file: Path | None = None, include_snippet: bool = True):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            file: Source file path (for error reporting)
            include_snippet: Attach source snippets to raised errors
        """
        self.text = text
        self.file = file
        self.pos = 0
        self.line = 1
        self.column = 1
        self._snippet_source = text if include_snippet else None

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def rewind(self, token: Token) -> None:
        """Reset the scanner to the start of ``token`` so it can be re-read."""
        self.pos = token.pos
        self.line = token.line
        self.column = token.column

    def resume_inside(self, token: Token, offset: int) -> None:
        """Continue scanning ``offset`` characters into a single-line word token."""
        self.pos = token.pos + offset
        self.line = token.line
        self.column = token.column + offset

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while (ch := self.current_char()) is not None and ch.isspace():
            self.advance()

    def skip_line_comment(self) -> None:
        """Skip comment (from // or # to end of line)."""
        while self.current_char() and self.current_char() != "\n":
            self.advance()

    def skip_block_comment(self) -> None:
        """Skip a /* ... */ comment; block comments do not nest."""
        start_line = self.line
        start_col = self.column
        self.advance()  # /
        self.advance()  # *

        while self.current_char() is not None:
            if self.current_char() == "*" and self.peek_char() == "/":
                self.advance()
                self.advance()
                return
            self.advance()

        raise make_unterminated_literal_error(
            "Unterminated block comment",
            self.file,
            start_line,
            start_col,
            self._snippet_source,
        )

    def skip_trivia(self) -> None:
        """Skip whitespace and comments up to the next significant character."""
        while True:
            self.skip_whitespace()
            ch = self.current_char()
            if ch == "#" or (ch == "/" and self.peek_char() == "/"):
                self.skip_line_comment()
            elif ch == "/" and self.peek_char() == "*":
                self.skip_block_comment()
            else:
                return

    def read_string(self) -> tuple[str, str]:
        """
        Read a quoted string.

        A backslash protects the following character, so neither an escaped
        delimiter nor an escaped backslash ends the string.

        Returns:
            Tuple of (raw body as written, body with own-delimiter and
            backslash escapes resolved)
        """
        start_line = self.line
        start_col = self.column
        quote = self.current_char()
        self.advance()  # skip opening quote

        body_start = self.pos
        chars = []
        while True:
            current = self.current_char()
            if current is None or current == quote:
                break

            if current == "\\":
                self.advance()
                escape_char = self.current_char()
                if escape_char is None:
                    break
                if escape_char in (quote, "\\"):
                    chars.append(escape_char)
                else:
                    chars.append("\\" + escape_char)
                self.advance()
            else:
                chars.append(current)
                self.advance()

        if self.current_char() != quote:
            raise make_unterminated_literal_error(
                "Unterminated string literal",
                self.file,
                start_line,
                start_col,
                self._snippet_source,
            )

        raw = self.text[body_start : self.pos]
        self.advance()  # skip closing quote
        return raw, "".join(chars)

    def read_expression(self) -> str:
        """
        Read an embedded ``${...}`` expression.

        Braces are counted so nested ``{``/``}`` pairs stay inside the
        expression; braces within quoted strings of the expression text are
        not counted.

        Returns:
            The expression source between ``${`` and the matching ``}``
        """
        start_line = self.line
        start_col = self.column
        self.advance()  # $
        self.advance()  # {

        body_start = self.pos
        depth = 1
        quote: str | None = None

        while (ch := self.current_char()) is not None:
            if quote:
                if ch == "\\":
                    self.advance()
                elif ch == quote:
                    quote = None
            elif ch in QUOTES:
                quote = ch
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    source = self.text[body_start : self.pos]
                    self.advance()  # skip closing brace
                    return source
            self.advance()

        raise make_unterminated_expression_error(
            self.file, start_line, start_col, self._snippet_source
        )

    def read_word(self, mode: LexMode) -> str:
        """
        Read a run of word characters for the given mode.

        ``.`` and ``:`` stay in the word only when another word character
        follows, so ``bar.baz.`` ends before its last dot.
        """
        punctuation = WORD_PUNCTUATION[mode]
        chars = []
        current = self.current_char()
        if mode == LexMode.VALUE and current == "+":
            chars.append(current)
            self.advance()
            current = self.current_char()
        while current and (current.isalnum() or current in punctuation):
            if current in JOINERS and not self._continues_word(self.peek_char(), punctuation):
                break
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def _continues_word(self, ch: str | None, punctuation: frozenset[str]) -> bool:
        if ch is None:
            return False
        return ch.isalnum() or (ch in punctuation and ch not in JOINERS)

    def read_pattern(self) -> str:
        """
        Read a bare include pattern.

        The pattern runs up to whitespace, a brace or a comment. ``//`` right
        after ``:`` belongs to a URI scheme (``resource://``) and is kept.
        """
        chars: list[str] = []
        current = self.current_char()
        while current and not current.isspace() and current not in PATTERN_TERMINATORS:
            if current == "#":
                break
            if current == "/" and self.peek_char() == "*":
                break
            if current == "/" and self.peek_char() == "/" and chars[-1:] != [":"]:
                break
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def _is_word_start(self, ch: str, mode: LexMode) -> bool:
        if ch.isalnum() or ch in WORD_PUNCTUATION[mode]:
            return ch not in (".", ":")
        return mode == LexMode.VALUE and ch == "+"

    def next_token(self, mode: LexMode = LexMode.PATH) -> Token:
        """
        Scan the next significant token.

        Args:
            mode: Word alphabet to apply if the token is a word

        Returns:
            The next token; EOF once input is exhausted

        Raises:
            ParseError: If a literal is unterminated or a character starts no token
        """
        self.skip_trivia()

        token_line = self.line
        token_col = self.column
        token_pos = self.pos
        raw = None

        ch = self.current_char()

        if ch is None:
            token_type = TokenType.EOF
            value = ""

        # Strings
        elif ch in QUOTES:
            token_type = TokenType.STRING
            raw, value = self.read_string()

        # Expressions
        elif ch == "$" and self.peek_char() == "{":
            token_type = TokenType.EXPRESSION
            value = self.read_expression()

        # Include patterns
        elif mode == LexMode.PATTERN and ch not in PATTERN_TERMINATORS:
            token_type = TokenType.PATTERN
            value = self.read_pattern()

        # Symbols
        elif ch in SYMBOLS:
            token_type = SYMBOLS[ch]
            value = ch
            self.advance()

        # Identifiers and names
        elif self._is_word_start(ch, mode):
            token_type = WORD_MODES[mode]
            value = self.read_word(mode)

        else:
            raise make_unexpected_token_error(
                "a path, value or symbol",
                f"unexpected character {ch!r}",
                self.file,
                token_line,
                token_col,
                self._snippet_source,
            )

        return Token(
            type=token_type,
            value=value,
            line=token_line,
            column=token_col,
            pos=token_pos,
            end_line=self.line,
            end_column=self.column,
            raw=raw,
        )


def tokenize(text: str, file: Path | None = None, mode: LexMode = LexMode.PATH) -> list[Token]:
    """
    Convenience function to tokenize Fusion text in a single mode.

    Args:
        text: Source text
        file: Source file path
        mode: Word alphabet applied to every word token

    Returns:
        List of tokens ending with EOF
    """
    lexer = Lexer(text, file)
    tokens = []
    while True:
        token = lexer.next_token(mode)
        tokens.append(token)
        if token.type == TokenType.EOF:
            return tokens
