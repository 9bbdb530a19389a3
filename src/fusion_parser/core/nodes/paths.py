"""
Path segment types for the Fusion AST.

A definition's path is an ordered list of segments; ``foo.bar`` yields two
property segments, ``prototype(Vendor.Site:Page)`` a single prototype segment.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .location import SourceLocation


class PropertySegment(BaseModel):
    """
    One property level of a path.

    Examples:
        - foo
        - 'quoted name'
        - @cache (meta-properties are ordinary properties)
    """

    kind: Literal["property"] = "property"
    name: str
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_meta(self) -> bool:
        """Check if this is a meta-property (``@process``, ``@if``...)."""
        return self.name.startswith("@")


class PrototypeSegment(BaseModel):
    """
    A ``prototype(Name)`` path segment.

    ``name`` is the raw dotted/colon-qualified identifier, e.g.
    ``Neos.Fusion:Value``.
    """

    kind: Literal["prototype"] = "prototype"
    name: str
    loc: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)


PathSegment = Annotated[PropertySegment | PrototypeSegment, Field(discriminator="kind")]
