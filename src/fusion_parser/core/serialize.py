"""
Plain-data views of the Fusion syntax tree.

``to_plain`` renders the compact shape used by JavaScript Fusion tooling,
where each node is keyed by what it is:

    [{"kind": "definition",
      "path": [{"property": "foo"}, {"prototype": "Vendor:Page"}],
      "value": {"simpleValue": "Test"},
      "block": [...],
      "loc": {"start": {"line": 1, "column": 1}, "end": {...}}}]

Absent values, blocks and locations are omitted rather than set to null.
``dump_model``/``load_model`` round-trip the pydantic models themselves.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter

from . import nodes

STATEMENT_LIST_ADAPTER: TypeAdapter[list[nodes.Statement]] = TypeAdapter(list[nodes.Statement])


def to_plain(statements: Sequence[nodes.Statement]) -> list[dict[str, Any]]:
    """Render statements in the compact plain-data shape."""
    return [_statement_to_plain(statement) for statement in statements]


def dump_json(statements: Sequence[nodes.Statement], indent: int | None = None) -> str:
    """Render statements in the compact shape as a JSON string."""
    return json.dumps(to_plain(statements), indent=indent)


def dump_model(statements: Sequence[nodes.Statement]) -> list[dict[str, Any]]:
    """Dump statements with their model field names (``kind``-tagged)."""
    return STATEMENT_LIST_ADAPTER.dump_python(list(statements), mode="json")


def load_model(data: Any) -> list[nodes.Statement]:
    """Validate data produced by ``dump_model`` back into statements."""
    return STATEMENT_LIST_ADAPTER.validate_python(data)


def _statement_to_plain(statement: nodes.Statement) -> dict[str, Any]:
    if isinstance(statement, nodes.Include):
        result: dict[str, Any] = {"kind": "include", "pattern": statement.pattern}
        return _with_loc(result, statement.loc)

    result = {
        "kind": "definition",
        "path": [_segment_to_plain(segment) for segment in statement.path],
    }
    if statement.value is not None:
        result["value"] = _value_to_plain(statement.value)
    if statement.block is not None:
        result["block"] = to_plain(statement.block)
    return _with_loc(result, statement.loc)


def _segment_to_plain(segment: nodes.PathSegment) -> dict[str, Any]:
    if isinstance(segment, nodes.PrototypeSegment):
        return _with_loc({"prototype": segment.name}, segment.loc)
    return _with_loc({"property": segment.name}, segment.loc)


def _value_to_plain(value: nodes.Value) -> dict[str, Any]:
    if isinstance(value, nodes.Expression):
        return _with_loc({"expression": value.source}, value.loc)
    if isinstance(value, nodes.ObjectName):
        return _with_loc({"objectName": value.name}, value.loc)
    return _with_loc({"simpleValue": value.data}, value.loc)


def _with_loc(result: dict[str, Any], loc: nodes.SourceLocation | None) -> dict[str, Any]:
    if loc is not None:
        result["loc"] = loc.model_dump()
    return result
