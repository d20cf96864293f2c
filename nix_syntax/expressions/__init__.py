from .binding import Binding
from .expression import NixNode, ParseResult
from .identifier import Identifier
from .indented_string import IndentedString
from .set import AttrSet
from .string import NixString

__all__ = [
    "AttrSet",
    "Binding",
    "Identifier",
    "IndentedString",
    "NixNode",
    "NixString",
    "ParseResult",
]
