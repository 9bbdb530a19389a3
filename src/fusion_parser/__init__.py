"""
fusion-parser - Parser for the Fusion rendering configuration DSL.

Turns Fusion source text into an immutable, optionally location-annotated
syntax tree of include directives and path definitions.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import nodes
from .core.errors import (
    ErrorContext,
    FusionError,
    IncludeError,
    ParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnterminatedExpressionError,
    UnterminatedLiteralError,
)
from .core.includes import IncludedSource, IncludeResolver, MappingIncludeResolver, expand_includes
from .core.nodes import (
    Definition,
    Expression,
    Include,
    ObjectName,
    PropertySegment,
    PrototypeSegment,
    SimpleValue,
    SourceLocation,
    SourcePosition,
)
from .core.options import ParseOptions
from .core.parser import parse, parse_file
from .core.serialize import dump_json, to_plain


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("fusion-parser")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "nodes",
    "parse",
    "parse_file",
    "ParseOptions",
    "expand_includes",
    "IncludedSource",
    "IncludeResolver",
    "MappingIncludeResolver",
    "to_plain",
    "dump_json",
    "Definition",
    "Include",
    "PropertySegment",
    "PrototypeSegment",
    "SimpleValue",
    "ObjectName",
    "Expression",
    "SourceLocation",
    "SourcePosition",
    "FusionError",
    "ParseError",
    "UnterminatedLiteralError",
    "UnterminatedExpressionError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "IncludeError",
    "ErrorContext",
]
