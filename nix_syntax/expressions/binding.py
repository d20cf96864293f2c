"""``attr.path = value;`` bindings inside attribute sets."""

from __future__ import annotations

from typing import Self

from pydantic import Field

from nix_syntax.exceptions import UnclosedAttrSet, snippet
from nix_syntax.expressions.expression import NixNode, expect
from nix_syntax.expressions.identifier import Identifier
from nix_syntax.expressions.string import NixString
from nix_syntax.options import ParserOptions
from nix_syntax.scanner import skip_trivia


def skip_set_trivia(data: bytes, pos: int) -> int:
    """Skip trivia inside a set body, which must not run out of input."""
    pos = skip_trivia(data, pos)
    if pos >= len(data):
        raise UnclosedAttrSet(
            "Attribute set is not closed",
            position=pos,
            expected=("'}'",),
            found=snippet(data, pos),
        )
    return pos


def _parse_attr(
    data: bytes, pos: int, options: ParserOptions
) -> tuple[Identifier | NixString, int]:
    if data.startswith(b'"', pos):
        return NixString.from_source(data, pos, 0, options)
    return Identifier.from_source(data, pos, 0, options)


def parse_attrpath(
    data: bytes, pos: int, options: ParserOptions
) -> tuple[tuple[Identifier | NixString, ...], int]:
    """Parse ``attr(.attr)*``; the returned offset is right after the last attr."""
    attrs: list[Identifier | NixString] = []
    while True:
        attr, pos = _parse_attr(data, pos, options)
        attrs.append(attr)
        lookahead = skip_trivia(data, pos)
        if not data.startswith(b".", lookahead):
            return tuple(attrs), pos
        pos = skip_set_trivia(data, lookahead + 1)


class Binding(NixNode):
    attrpath: tuple[Identifier | NixString, ...] = Field(min_length=1)
    value: NixNode

    @property
    def name(self) -> str:
        """Dotted attribute path, with string attrs rendered by their value."""
        return ".".join(
            attr.name if isinstance(attr, Identifier) else attr.value
            for attr in self.attrpath
        )

    @classmethod
    def from_source(
        cls, data: bytes, pos: int, depth: int, options: ParserOptions
    ) -> tuple[Self, int]:
        from nix_syntax.mapping import parse_expression_at

        attrpath, pos = parse_attrpath(data, pos, options)
        pos = skip_set_trivia(data, pos)
        pos = expect(data, pos, b"=", "'='")
        pos = skip_set_trivia(data, pos)
        value, pos = parse_expression_at(data, pos, depth, options)
        pos = skip_set_trivia(data, pos)
        pos = expect(data, pos, b";", "';'")
        return cls(attrpath=attrpath, value=value), pos


__all__ = ["Binding", "parse_attrpath", "skip_set_trivia"]
