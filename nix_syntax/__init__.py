"""
nix-syntax

A Python library that parses Nix string literals, indented strings,
identifiers and attribute sets into an immutable syntax tree.
"""

from nix_syntax.exceptions import (IncompleteInput, InvalidEncoding,
                                   NestingTooDeep, NixSyntaxError,
                                   StructuralMismatch, UnclosedAttrSet,
                                   UnterminatedLiteral)
from nix_syntax.expressions import (AttrSet, Binding, Identifier,
                                    IndentedString, NixNode, NixString,
                                    ParseResult)
from nix_syntax.options import ParserOptions
from nix_syntax.parser import (iter_expressions, parse, parse_attr_set,
                               parse_expression, parse_identifier,
                               parse_indented_string, parse_string)

__all__ = [
    "AttrSet",
    "Binding",
    "Identifier",
    "IncompleteInput",
    "IndentedString",
    "InvalidEncoding",
    "NestingTooDeep",
    "NixNode",
    "NixString",
    "NixSyntaxError",
    "ParseResult",
    "ParserOptions",
    "StructuralMismatch",
    "UnclosedAttrSet",
    "UnterminatedLiteral",
    "iter_expressions",
    "parse",
    "parse_attr_set",
    "parse_expression",
    "parse_identifier",
    "parse_indented_string",
    "parse_string",
]
