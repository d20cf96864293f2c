from __future__ import annotations


class NixSyntaxError(SyntaxError):
    """Base class for every parse failure.

    ``position`` is the byte offset in the parsed buffer, ``expected`` lists
    the forms that would have been accepted there and ``found`` holds a short
    snippet of the offending input.
    """

    def __init__(
        self,
        message: str,
        *,
        position: int = 0,
        expected: tuple[str, ...] = (),
        found: bytes = b"",
    ) -> None:
        super().__init__(message)
        self.position = position
        self.expected = tuple(expected)
        self.found = found

    def __str__(self) -> str:
        return f"{self.msg} at byte {self.position}"

    def line_column(self, source: bytes | str) -> tuple[int, int]:
        """Translate ``position`` into a 1-based (line, column) pair."""
        data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        head = data[: self.position]
        line = head.count(b"\n") + 1
        column = self.position - (head.rfind(b"\n") + 1) + 1
        return line, column


class StructuralMismatch(NixSyntaxError):
    """The expected syntactic form is not present at this position."""

    pass


class InvalidEncoding(NixSyntaxError):
    """Delimiters matched but the enclosed bytes are not valid text."""

    pass


class NestingTooDeep(NixSyntaxError):
    """Attribute sets nest deeper than the configured limit."""

    pass


class IncompleteInput(NixSyntaxError):
    """Input ended before a construct was complete.

    Streaming callers catch this to supply more bytes and retry.
    """

    pass


class UnterminatedLiteral(IncompleteInput):
    """A literal or block comment has no closing delimiter."""

    pass


class UnclosedAttrSet(IncompleteInput):
    """Input ended inside an attribute set body."""

    pass


def snippet(data: bytes, position: int, width: int = 16) -> bytes:
    """Return the bytes at ``position`` used as the ``found`` part of errors."""
    return bytes(data[position : position + width])


__all__ = [
    "IncompleteInput",
    "InvalidEncoding",
    "NestingTooDeep",
    "NixSyntaxError",
    "StructuralMismatch",
    "UnclosedAttrSet",
    "UnterminatedLiteral",
    "snippet",
]
