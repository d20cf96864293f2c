from __future__ import annotations

from typing import Self

from nix_syntax.escapes import unescape_string
from nix_syntax.exceptions import UnterminatedLiteral, snippet
from nix_syntax.expressions.expression import NixNode, decode_text, expect
from nix_syntax.options import ParserOptions
from nix_syntax.scanner import scan_string


class NixString(NixNode):
    """Double-quoted string literal.

    ``text`` is the content between the quotes, escapes kept verbatim.
    """

    text: str

    @property
    def value(self) -> str:
        """Content with escape sequences decoded."""
        return unescape_string(self.text)

    @classmethod
    def from_source(
        cls, data: bytes, pos: int, depth: int, options: ParserOptions
    ) -> tuple[Self, int]:
        start = expect(data, pos, b'"', "'\"'")
        close = scan_string(data, start)
        if close is None:
            raise UnterminatedLiteral(
                "Unterminated string",
                position=pos,
                expected=("'\"'",),
                found=snippet(data, pos),
            )
        text = decode_text(data, start, close, options)
        return cls(text=text), close + 1


__all__ = ["NixString"]
