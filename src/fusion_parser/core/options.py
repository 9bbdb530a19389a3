"""
Parse options for the Fusion parser.

Options can be passed as a ``ParseOptions`` instance or as a plain mapping;
both the ``addLocation`` spelling used by existing Fusion tooling and the
Python ``add_location`` spelling are accepted.

Usage:
    from fusion_parser import parse

    tree = parse(source, {"addLocation": True})
    tree = parse(source, add_location=True)
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParseOptions(BaseModel):
    """
    Options controlling a single parse.

    Attributes:
        add_location: Attach start/end source locations to every node
        file: Source file reported in error messages
        include_snippet: Attach surrounding source lines to parse errors
        max_include_depth: Nesting limit for include expansion
    """

    add_location: bool = Field(default=False, alias="addLocation")
    file: Path | None = None
    include_snippet: bool = True
    max_include_depth: int = Field(default=32, ge=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


# Alias -> field name, for keyword overrides
_FIELD_NAMES = {"addLocation": "add_location"}


def resolve_options(
    options: ParseOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ParseOptions:
    """
    Normalize the accepted option forms into a ParseOptions instance.

    Args:
        options: ParseOptions, mapping of option values, or None for defaults
        **overrides: Individual options applied on top (e.g. add_location=True)

    Returns:
        Validated ParseOptions
    """
    if options is None:
        resolved = ParseOptions()
    elif isinstance(options, ParseOptions):
        resolved = options
    else:
        resolved = ParseOptions.model_validate(dict(options))

    if overrides:
        merged = resolved.model_dump()
        for key, value in overrides.items():
            merged[_FIELD_NAMES.get(key, key)] = value
        resolved = ParseOptions.model_validate(merged)

    return resolved
