import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from . import nodes
from .options import ParseOptions, resolve_options
from .parser_impl import parse_fusion

logger = logging.getLogger(__name__)


def parse(
    source: str,
    options: ParseOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> list[nodes.Statement]:
    """
    Parse Fusion source text into its syntax tree.

    Each call builds its own lexer and parser; parsing the same source with
    the same options always yields an equal tree.

    Args:
        source: Full Fusion document text
        options: ParseOptions, a mapping such as {"addLocation": True}, or None
        **overrides: Individual options, e.g. add_location=True

    Returns:
        Top-level statements in source order

    Raises:
        ParseError: On the first malformed construct
    """
    resolved = resolve_options(options, **overrides)
    logger.debug(
        "Parsing %s (%d chars, locations %s)",
        resolved.file or "<string>",
        len(source),
        "on" if resolved.add_location else "off",
    )

    statements = parse_fusion(source, resolved)

    logger.debug("Parsed %d top-level statements", len(statements))
    return statements


def parse_file(
    path: Path | str,
    options: ParseOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> list[nodes.Statement]:
    """
    Read a UTF-8 Fusion file and parse it.

    The file path is recorded in error contexts unless options name another.

    Args:
        path: Fusion file to read
        options: ParseOptions, a mapping of option values, or None
        **overrides: Individual options, e.g. add_location=True

    Returns:
        Top-level statements in source order
    """
    path = Path(path)
    resolved = resolve_options(options, **overrides)
    if resolved.file is None:
        resolved = resolved.model_copy(update={"file": path})

    text = path.read_text(encoding="utf-8")
    return parse(text, resolved)
