from __future__ import annotations

import logging
from collections.abc import Iterator

from nix_syntax.exceptions import StructuralMismatch, snippet
from nix_syntax.expressions.expression import NixNode, ParseResult
from nix_syntax.expressions.identifier import Identifier
from nix_syntax.expressions.indented_string import IndentedString
from nix_syntax.expressions.set import AttrSet
from nix_syntax.expressions.string import NixString
from nix_syntax.mapping import parse_expression_at
from nix_syntax.options import DEFAULT_OPTIONS, ParserOptions
from nix_syntax.scanner import skip_trivia

logger = logging.getLogger(__name__)

Source = bytes | bytearray | memoryview | str


def _as_bytes(source: Source) -> bytes:
    """Normalize input so the scanners always work on immutable bytes."""
    if isinstance(source, str):
        return source.encode("utf-8")
    return bytes(source)


def _parse_rule(
    expression_type: type[NixNode], source: Source, options: ParserOptions | None
) -> ParseResult:
    data = _as_bytes(source)
    node, end = expression_type.from_source(data, 0, 0, options or DEFAULT_OPTIONS)
    return ParseResult(node, data[end:])


def parse_string(source: Source, options: ParserOptions | None = None) -> ParseResult:
    """Parse a ``"..."`` literal at the start of ``source``."""
    return _parse_rule(NixString, source, options)


def parse_indented_string(
    source: Source, options: ParserOptions | None = None
) -> ParseResult:
    """Parse a ``''...''`` literal at the start of ``source``."""
    return _parse_rule(IndentedString, source, options)


def parse_identifier(source: Source, options: ParserOptions | None = None) -> ParseResult:
    return _parse_rule(Identifier, source, options)


def parse_attr_set(source: Source, options: ParserOptions | None = None) -> ParseResult:
    return _parse_rule(AttrSet, source, options)


def parse_expression(
    source: Source, options: ParserOptions | None = None
) -> ParseResult:
    """Parse the first expression after any leading trivia.

    Trailing trivia stays in the remainder, so the remainder of a
    concatenation of expressions can be fed straight back in.
    """
    data = _as_bytes(source)
    pos = skip_trivia(data, 0)
    node, end = parse_expression_at(data, pos, 0, options or DEFAULT_OPTIONS)
    return ParseResult(node, data[end:])


def iter_expressions(
    source: Source, options: ParserOptions | None = None
) -> Iterator[NixNode]:
    """Yield every top-level expression of a document in source order."""
    data = _as_bytes(source)
    options = options or DEFAULT_OPTIONS
    pos = skip_trivia(data, 0)
    while pos < len(data):
        node, pos = parse_expression_at(data, pos, 0, options)
        yield node
        pos = skip_trivia(data, pos)


def parse(source: Source, options: ParserOptions | None = None) -> NixNode:
    """Parse a document holding exactly one expression and return its root."""
    data = _as_bytes(source)
    options = options or DEFAULT_OPTIONS
    pos = skip_trivia(data, 0)
    node, end = parse_expression_at(data, pos, 0, options)
    end = skip_trivia(data, end)
    if end < len(data):
        raise StructuralMismatch(
            "Unexpected content after expression",
            position=end,
            expected=("end of input",),
            found=snippet(data, end),
        )
    logger.debug("Parsed %s from %d bytes", type(node).__name__, len(data))
    return node


__all__ = [
    "iter_expressions",
    "parse",
    "parse_attr_set",
    "parse_expression",
    "parse_identifier",
    "parse_indented_string",
    "parse_string",
]
