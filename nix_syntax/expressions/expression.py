from __future__ import annotations

from typing import NamedTuple, Self

from pydantic import BaseModel, ConfigDict

from nix_syntax.exceptions import InvalidEncoding, StructuralMismatch, snippet
from nix_syntax.options import ParserOptions


class NixNode(BaseModel):
    """Base class for all syntax nodes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_source(
        cls, data: bytes, pos: int, depth: int, options: ParserOptions
    ) -> tuple[Self, int]:
        """Parse a node starting at ``pos`` and return it with the end offset."""
        raise NotImplementedError


class ParseResult(NamedTuple):
    node: NixNode
    remainder: bytes


def expect(data: bytes, pos: int, token: bytes, description: str) -> int:
    """Consume ``token`` at ``pos`` or raise a structural mismatch."""
    if not data.startswith(token, pos):
        raise StructuralMismatch(
            f"Expected {description}",
            position=pos,
            expected=(description,),
            found=snippet(data, pos),
        )
    return pos + len(token)


def decode_text(data: bytes, start: int, end: int, options: ParserOptions) -> str:
    """Decode ``data[start:end]`` into an owned string."""
    try:
        return data[start:end].decode(options.encoding)
    except UnicodeDecodeError as exc:
        position = start + exc.start
        raise InvalidEncoding(
            f"Literal content is not valid {options.encoding}",
            position=position,
            expected=(f"{options.encoding} text",),
            found=snippet(data, position),
        ) from exc


__all__ = ["NixNode", "ParseResult", "decode_text", "expect"]
