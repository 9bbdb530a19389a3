"""Core Fusion functionality: lexer, parser, AST nodes, errors and include expansion."""

from . import nodes
from .errors import (
    ErrorContext,
    FusionError,
    IncludeError,
    ParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnterminatedExpressionError,
    UnterminatedLiteralError,
)
from .includes import IncludedSource, IncludeResolver, MappingIncludeResolver, expand_includes
from .options import ParseOptions
from .parser import parse, parse_file
from .serialize import dump_json, dump_model, load_model, to_plain

__all__ = [
    "nodes",
    "FusionError",
    "ParseError",
    "UnterminatedLiteralError",
    "UnterminatedExpressionError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "IncludeError",
    "ErrorContext",
    "ParseOptions",
    "parse",
    "parse_file",
    "expand_includes",
    "IncludedSource",
    "IncludeResolver",
    "MappingIncludeResolver",
    "to_plain",
    "dump_json",
    "dump_model",
    "load_model",
]
