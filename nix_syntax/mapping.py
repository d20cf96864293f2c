from __future__ import annotations

import logging

from nix_syntax.exceptions import StructuralMismatch, snippet
from nix_syntax.expressions.expression import NixNode
from nix_syntax.expressions.identifier import Identifier
from nix_syntax.expressions.indented_string import IndentedString
from nix_syntax.expressions.set import AttrSet
from nix_syntax.expressions.string import NixString
from nix_syntax.options import ParserOptions

logger = logging.getLogger(__name__)

# Tried in order; AttrSet comes before Identifier so ``rec {`` wins over ``rec``.
EXPRESSION_TYPES: list[type[NixNode]] = [
    AttrSet,
    IndentedString,
    NixString,
    Identifier,
]


def register_expression(
    cls: type[NixNode], *, before: type[NixNode] | None = None
) -> type[NixNode]:
    """Allow extensions to plug in new expressions without editing the dispatcher."""
    if cls in EXPRESSION_TYPES:
        return cls
    if before is None:
        EXPRESSION_TYPES.append(cls)
    else:
        EXPRESSION_TYPES.insert(EXPRESSION_TYPES.index(before), cls)
    return cls


def parse_expression_at(
    data: bytes, pos: int, depth: int, options: ParserOptions
) -> tuple[NixNode, int]:
    """Try every expression rule at ``pos`` and return the first match.

    Only structural mismatches at ``pos`` fall through to the next rule. A
    mismatch further in means the rule had committed, so it propagates like
    incomplete input, encoding and depth failures do.
    """
    expected: list[str] = []
    for expression_type in EXPRESSION_TYPES:
        try:
            return expression_type.from_source(data, pos, depth, options)
        except StructuralMismatch as exc:
            if exc.position > pos:
                raise
            expected.extend(exc.expected)

    logger.debug("No expression rule matched at byte %d", pos)
    message = "Unexpected end of input" if pos >= len(data) else "Expected an expression"
    raise StructuralMismatch(
        message,
        position=pos,
        expected=tuple(dict.fromkeys(expected)),
        found=snippet(data, pos),
    )


__all__ = ["EXPRESSION_TYPES", "parse_expression_at", "register_expression"]
