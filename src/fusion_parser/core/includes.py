"""
Include expansion for parsed Fusion trees.

The parser records ``include:`` directives verbatim; locating the included
sources is left to an ``IncludeResolver`` supplied by the caller (for
example one that globs a package's ``Private/Fusion`` directory).
``expand_includes`` asks the resolver for each pattern, parses what it
returns and splices the resulting statements in place of the directive.

Usage:
    from fusion_parser import expand_includes, parse

    tree = parse(root_source)
    tree = expand_includes(tree, resolver)
"""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from . import nodes
from .errors import make_include_error
from .options import ParseOptions, resolve_options
from .parser_impl import parse_fusion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncludedSource:
    """
    Source text supplied for an include pattern.

    Attributes:
        name: Stable identifier of the source, used for cycle detection
        text: Fusion source text
        file: File the text came from, reported in parse errors
    """

    name: str
    text: str
    file: Path | None = None


@runtime_checkable
class IncludeResolver(Protocol):
    """Locates the sources an include pattern refers to."""

    def resolve(self, pattern: str, parent: IncludedSource | None) -> Iterable[IncludedSource]:
        """
        Return the sources matching ``pattern``, in inclusion order.

        Args:
            pattern: Include pattern exactly as written in the source
            parent: Source containing the directive (None for the root document)
        """
        ...


class MappingIncludeResolver:
    """
    In-memory resolver over a name -> source text mapping.

    Patterns match names exactly or as shell-style globs
    (``Prototypes/*.fusion``); glob matches are returned sorted by name.
    """

    def __init__(self, sources: Mapping[str, str]):
        self.sources = dict(sources)

    def resolve(self, pattern: str, parent: IncludedSource | None) -> Iterable[IncludedSource]:
        if pattern in self.sources:
            return [IncludedSource(name=pattern, text=self.sources[pattern])]
        return [
            IncludedSource(name=name, text=self.sources[name])
            for name in sorted(self.sources)
            if fnmatch.fnmatchcase(name, pattern)
        ]


def expand_includes(
    statements: Sequence[nodes.Statement],
    resolver: IncludeResolver,
    options: ParseOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> list[nodes.Statement]:
    """
    Replace include directives with the statements of the included sources.

    Includes are expanded at every depth, including inside blocks, and the
    statements of included sources are themselves expanded. A pattern the
    resolver matches nothing for expands to nothing.

    Args:
        statements: Parsed statements (e.g. from ``parse``)
        resolver: Locates the sources for each pattern
        options: Options used to parse included sources
        **overrides: Individual options, e.g. add_location=True

    Returns:
        New statement list without Include nodes

    Raises:
        IncludeError: On include cycles or nesting beyond max_include_depth
        ParseError: If an included source is malformed
    """
    resolved = resolve_options(options, **overrides)
    return _expand(statements, resolver, resolved, parent=None, active=())


def _expand(
    statements: Sequence[nodes.Statement],
    resolver: IncludeResolver,
    options: ParseOptions,
    parent: IncludedSource | None,
    active: tuple[str, ...],
) -> list[nodes.Statement]:
    expanded: list[nodes.Statement] = []

    for statement in statements:
        if isinstance(statement, nodes.Include):
            expanded.extend(_expand_include(statement, resolver, options, parent, active))
        elif statement.block is not None:
            block = _expand(statement.block, resolver, options, parent, active)
            expanded.append(statement.model_copy(update={"block": block}))
        else:
            expanded.append(statement)

    return expanded


def _expand_include(
    include: nodes.Include,
    resolver: IncludeResolver,
    options: ParseOptions,
    parent: IncludedSource | None,
    active: tuple[str, ...],
) -> list[nodes.Statement]:
    if len(active) >= options.max_include_depth:
        raise make_include_error(
            f"Include nesting exceeds {options.max_include_depth} levels", include.pattern
        )

    sources = list(resolver.resolve(include.pattern, parent))
    if not sources:
        logger.debug("Include pattern %r matched no sources", include.pattern)

    statements: list[nodes.Statement] = []
    for source in sources:
        if source.name in active:
            chain = " -> ".join((*active, source.name))
            raise make_include_error(f"Include cycle detected: {chain}", include.pattern)

        logger.debug("Including %s for pattern %r", source.name, include.pattern)
        source_options = options.model_copy(update={"file": source.file})
        parsed = parse_fusion(source.text, source_options)
        statements.extend(
            _expand(parsed, resolver, options, parent=source, active=(*active, source.name))
        )

    return statements
