from __future__ import annotations

import re
from typing import Self

from pydantic import field_validator

from nix_syntax.exceptions import StructuralMismatch, snippet
from nix_syntax.expressions.expression import NixNode
from nix_syntax.options import ParserOptions

IDENTIFIER_PATTERN = re.compile(rb"[a-zA-Z_][a-zA-Z0-9_-]*")
_NAME_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_-]*")


class Identifier(NixNode):
    name: str

    @field_validator("name")
    @classmethod
    def valid_name(cls, value: str) -> str:
        if not _NAME_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid identifier: {value!r}")
        return value

    @classmethod
    def from_source(
        cls, data: bytes, pos: int, depth: int, options: ParserOptions
    ) -> tuple[Self, int]:
        match = IDENTIFIER_PATTERN.match(data, pos)
        if match is None:
            raise StructuralMismatch(
                "Expected identifier",
                position=pos,
                expected=("identifier",),
                found=snippet(data, pos),
            )
        return cls(name=match.group().decode("ascii")), match.end()


__all__ = ["IDENTIFIER_PATTERN", "Identifier"]
