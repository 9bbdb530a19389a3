"""
Fusion DSL Parser Package.

The parser is built using mixins to separate parsing logic by construct
type (paths, values, statements) on top of BaseParser's token utilities.

The main exports are:
- Parser: The complete parser class
- parse_fusion: Convenience function to parse Fusion source text

Usage:
    from fusion_parser.core.parser_impl import parse_fusion

    statements = parse_fusion(text, ParseOptions(add_location=True))
"""

from .. import nodes
from ..lexer import Lexer
from ..options import ParseOptions
from .base import BaseParser, located
from .paths import PathParserMixin
from .statements import StatementParserMixin
from .values import ValueParserMixin


class Parser(
    BaseParser,
    PathParserMixin,
    ValueParserMixin,
    StatementParserMixin,
):
    """
    Complete Fusion parser.

    - PathParserMixin: dotted, quoted and prototype(...) path segments
    - ValueParserMixin: literals, expressions and object names
    - StatementParserMixin: includes, definitions and blocks
    """

    def parse(self) -> list[nodes.Statement]:
        """
        Parse the entire document.

        Returns:
            Top-level statements in source order
        """
        return self.parse_statement_list()


def parse_fusion(text: str, options: ParseOptions | None = None) -> list[nodes.Statement]:
    """
    Parse Fusion source text.

    Args:
        text: Fusion source text
        options: Parse options

    Returns:
        Top-level statements in source order
    """
    options = options or ParseOptions()
    lexer = Lexer(text, options.file, include_snippet=options.include_snippet)
    parser = Parser(lexer, options)
    return parser.parse()


__all__ = [
    "Parser",
    "parse_fusion",
    "BaseParser",
    "located",
    "PathParserMixin",
    "ValueParserMixin",
    "StatementParserMixin",
]
