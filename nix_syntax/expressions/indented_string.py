from __future__ import annotations

from typing import Self

from nix_syntax.escapes import unescape_indented_string
from nix_syntax.exceptions import UnterminatedLiteral, snippet
from nix_syntax.expressions.expression import NixNode, decode_text, expect
from nix_syntax.options import ParserOptions
from nix_syntax.scanner import scan_indented_string


class IndentedString(NixNode):
    text: str

    @property
    def value(self) -> str:
        """Content with ``'''``-style escapes decoded, indentation untouched."""
        return unescape_indented_string(self.text)

    @classmethod
    def from_source(
        cls, data: bytes, pos: int, depth: int, options: ParserOptions
    ) -> tuple[Self, int]:
        """Keep the raw payload between the ``''`` delimiters."""
        start = expect(data, pos, b"''", "\"''\"")
        close = scan_indented_string(data, start)
        if close is None:
            raise UnterminatedLiteral(
                "Unterminated indented string",
                position=pos,
                expected=("\"''\"",),
                found=snippet(data, pos),
            )
        text = decode_text(data, start, close, options)
        return cls(text=text), close + 2


__all__ = ["IndentedString"]
