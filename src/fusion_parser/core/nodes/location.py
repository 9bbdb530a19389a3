"""Source location tracking for AST nodes.

Records where in the source a Fusion construct started and ended,
enabling source-mapped diagnostics and editor navigation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SourcePosition(BaseModel):
    """A single point in the source text.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
    """

    line: int
    column: int

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class SourceLocation(BaseModel):
    """Span of source text a node was built from.

    ``start`` is the node's first significant character; ``end`` is the
    position just past its last consumed character.
    """

    start: SourcePosition
    end: SourcePosition

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
