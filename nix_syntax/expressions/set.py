"""Attribute set parsing."""

from __future__ import annotations

import logging
from typing import Self

from nix_syntax.exceptions import NestingTooDeep, StructuralMismatch, snippet
from nix_syntax.expressions.binding import Binding, skip_set_trivia
from nix_syntax.expressions.expression import NixNode, expect
from nix_syntax.expressions.identifier import IDENTIFIER_PATTERN, Identifier
from nix_syntax.expressions.string import NixString
from nix_syntax.options import ParserOptions
from nix_syntax.scanner import skip_trivia

logger = logging.getLogger(__name__)

CLOSE_BRACE = ord("}")


def _rec_keyword_end(data: bytes, pos: int) -> int | None:
    """Return the offset after a standalone ``rec`` keyword at ``pos``."""
    match = IDENTIFIER_PATTERN.match(data, pos)
    if match is None or match.group() != b"rec":
        return None
    return match.end()


def _parse_element(
    data: bytes, pos: int, depth: int, options: ParserOptions
) -> tuple[NixNode, int]:
    """Parse one set member: a binding or a bare expression."""
    from nix_syntax.mapping import parse_expression_at

    element, end = parse_expression_at(data, pos, depth, options)
    if isinstance(element, (Identifier, NixString)):
        lookahead = skip_trivia(data, end)
        if data.startswith((b"=", b"."), lookahead):
            return Binding.from_source(data, pos, depth, options)
    return element, end


class AttrSet(NixNode):
    """``{ ... }`` or ``rec { ... }`` with its members in source order."""

    bindings: tuple[NixNode, ...] = ()
    recursive: bool = False

    @classmethod
    def from_source(
        cls, data: bytes, pos: int, depth: int, options: ParserOptions
    ) -> tuple[Self, int]:
        recursive = False
        rec_end = _rec_keyword_end(data, pos)
        if rec_end is not None:
            brace = skip_trivia(data, rec_end)
            # A bare `rec` is left for the identifier rule.
            if not data.startswith(b"{", brace):
                raise StructuralMismatch(
                    "Expected '{' after 'rec'",
                    position=pos,
                    expected=("'{'",),
                    found=snippet(data, pos),
                )
            recursive = True
            pos = brace

        opening = pos
        pos = expect(data, pos, b"{", "'{'")
        if depth >= options.max_depth:
            logger.warning(
                "Attribute sets nested deeper than %d levels at byte %d",
                options.max_depth,
                opening,
            )
            raise NestingTooDeep(
                f"Attribute sets nested deeper than {options.max_depth} levels",
                position=opening,
                expected=(),
                found=snippet(data, opening),
            )

        bindings: list[NixNode] = []
        while True:
            pos = skip_set_trivia(data, pos)
            if data[pos] == CLOSE_BRACE:
                return cls(bindings=tuple(bindings), recursive=recursive), pos + 1
            element, pos = _parse_element(data, pos, depth + 1, options)
            bindings.append(element)


__all__ = ["AttrSet"]
