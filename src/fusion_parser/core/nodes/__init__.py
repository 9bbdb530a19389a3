"""
Fusion abstract syntax tree types.

All nodes are immutable pydantic models. ``Statement``, ``PathSegment`` and
``Value`` are closed unions discriminated on each node's ``kind`` field.
"""

from .location import SourceLocation, SourcePosition
from .paths import PathSegment, PropertySegment, PrototypeSegment
from .statements import Definition, Include, Statement
from .values import Expression, ObjectName, SimpleValue, Value

__all__ = [
    "SourceLocation",
    "SourcePosition",
    "PathSegment",
    "PropertySegment",
    "PrototypeSegment",
    "Definition",
    "Include",
    "Statement",
    "Expression",
    "ObjectName",
    "SimpleValue",
    "Value",
]
