"""
Statement types for the Fusion AST.

A document (and every block) is an ordered list of statements. Order is
preserved exactly as encountered; later definitions are not merged into
earlier ones.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .location import SourceLocation
from .paths import PathSegment, PrototypeSegment
from .values import Value


class Include(BaseModel):
    """
    An include directive.

    Examples:
        - include: Prototypes/*.fusion
        - include: 'resource://Vendor.Site/Private/Fusion/Root.fusion'
    """

    kind: Literal["include"] = "include"
    pattern: str
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)


class Definition(BaseModel):
    """
    A path with an optional value and an optional nested block.

    Examples:
        - foo.bar = "Test"
        - prototype(Vendor.Site:Teaser) { ... }
        - renderer = Neos.Fusion:Value { value = ${props.foo} }
        - @cache (bare path, no value and no block)
    """

    kind: Literal["definition"] = "definition"
    path: list[PathSegment] = Field(min_length=1)
    value: Value | None = None
    block: list[Statement] | None = None
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_prototype(self) -> bool:
        """Check if this definition declares (or extends) a prototype."""
        return len(self.path) == 1 and isinstance(self.path[0], PrototypeSegment)

    @property
    def dotted_path(self) -> str:
        """Path rendered back to Fusion notation, e.g. ``prototype(A:B).foo``."""
        parts = []
        for segment in self.path:
            if isinstance(segment, PrototypeSegment):
                parts.append(f"prototype({segment.name})")
            else:
                parts.append(segment.name)
        return ".".join(parts)


Statement = Annotated[Include | Definition, Field(discriminator="kind")]

Definition.model_rebuild()
