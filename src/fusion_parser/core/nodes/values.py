"""
Value types for the Fusion AST.

The right-hand side of ``path = value`` is exactly one of a literal scalar,
an object name reference, or an opaque embedded expression.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .location import SourceLocation


class SimpleValue(BaseModel):
    """
    A literal scalar.

    Examples:
        - "Test" / 'Test'  -> str
        - 42 / -1.5        -> int / float
        - true / FALSE     -> bool
        - null / NULL      -> None
    """

    kind: Literal["simple"] = "simple"
    data: bool | int | float | str | None
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)


class ObjectName(BaseModel):
    """A bare reference to an instantiable prototype, e.g. ``Neos.Fusion:Value``."""

    kind: Literal["object_name"] = "object_name"
    name: str
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)


class Expression(BaseModel):
    """Raw text between ``${`` and its balanced ``}``, never interpreted."""

    kind: Literal["expression"] = "expression"
    source: str
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)


Value = Annotated[SimpleValue | ObjectName | Expression, Field(discriminator="kind")]
