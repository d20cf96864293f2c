"""Reference parser backed by the tree-sitter Nix grammar.

Maps the tree-sitter CST onto the same node models as the hand-written
grammar, for the subset of Nix both understand. Used to cross-check the
hand-written rules against an independent implementation.
"""

from __future__ import annotations

import tree_sitter_nix as ts_nix
from tree_sitter import Language, Node, Parser

from nix_syntax.exceptions import StructuralMismatch
from nix_syntax.expressions.binding import Binding
from nix_syntax.expressions.expression import NixNode
from nix_syntax.expressions.identifier import Identifier
from nix_syntax.expressions.indented_string import IndentedString
from nix_syntax.expressions.set import AttrSet
from nix_syntax.expressions.string import NixString

# Initialize the tree-sitter parser only once for efficiency.
NIX_LANGUAGE = Language(ts_nix.language())
PARSER = Parser(NIX_LANGUAGE)


def parse_reference_cst(source_code: bytes | str) -> Node:
    """Parse Nix source code and return the root of its CST."""
    code_bytes = (
        source_code.encode("utf-8") if isinstance(source_code, str) else source_code
    )
    tree = PARSER.parse(code_bytes)
    return tree.root_node


def _first_error(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return None


def _node_text(node: Node) -> bytes:
    if node.text is None:
        raise ValueError("Missing expression")
    return node.text


def _attr_from_cst(node: Node) -> Identifier | NixString:
    match node.type:
        case "identifier":
            return Identifier(name=_node_text(node).decode())
        case "string_expression":
            return NixString(text=_node_text(node)[1:-1].decode())
        case _:
            raise ValueError(f"Unsupported attrpath element: {node.type}")


def _binding_from_cst(node: Node) -> Binding:
    if node.type != "binding":
        raise ValueError(f"Unsupported child node: {node.type}")
    attrpath = node.child_by_field_name("attrpath")
    expression = node.child_by_field_name("expression")
    if attrpath is None or expression is None:
        raise ValueError("Could not parse binding")
    return Binding(
        attrpath=tuple(_attr_from_cst(attr) for attr in attrpath.named_children),
        value=tree_sitter_node_to_node(expression),
    )


def tree_sitter_node_to_node(node: Node) -> NixNode:
    """Convert a supported tree-sitter node into a syntax node."""
    match node.type:
        case "variable_expression":
            return Identifier(name=_node_text(node).decode())
        case "string_expression":
            return NixString(text=_node_text(node)[1:-1].decode())
        case "indented_string_expression":
            return IndentedString(text=_node_text(node)[2:-2].decode())
        case "attrset_expression" | "rec_attrset_expression":
            bindings: list[NixNode] = []
            for child in node.named_children:
                if child.type == "comment":
                    continue
                if child.type != "binding_set":
                    raise ValueError(f"Unsupported child node: {child.type}")
                bindings.extend(
                    _binding_from_cst(binding)
                    for binding in child.named_children
                    if binding.type != "comment"
                )
            return AttrSet(
                bindings=tuple(bindings),
                recursive=node.type == "rec_attrset_expression",
            )
        case _:
            raise ValueError(f"Unsupported node type: {node.type}")


def parse_reference(source_code: bytes | str) -> NixNode:
    """Parse a single-expression document with tree-sitter."""
    root = parse_reference_cst(source_code)
    if root.has_error:
        error = _first_error(root)
        position = error.start_byte if error is not None else 0
        raise StructuralMismatch(
            "tree-sitter reported a syntax error", position=position
        )
    expressions = [child for child in root.named_children if child.type != "comment"]
    if len(expressions) != 1:
        raise StructuralMismatch(
            f"Expected exactly one expression, found {len(expressions)}",
            position=0,
        )
    return tree_sitter_node_to_node(expressions[0])


__all__ = [
    "NIX_LANGUAGE",
    "PARSER",
    "parse_reference",
    "parse_reference_cst",
    "tree_sitter_node_to_node",
]
