"""Byte-level scanning for literal delimiters and inter-token trivia.

The scanners take the whole buffer plus the offset just past an opening
delimiter and return the offset of the matching closing delimiter, or
``None`` when the buffer ends before one is found.
"""

from __future__ import annotations

from nix_syntax.exceptions import UnterminatedLiteral, snippet

QUOTE = ord('"')
APOSTROPHE = ord("'")
BACKSLASH = ord("\\")
DOLLAR = ord("$")
HASH = ord("#")

WHITESPACE = frozenset(b" \t\r\n")


def scan_string(data: bytes, start: int = 0) -> int | None:
    """Find the closing ``"`` of a double-quoted string.

    A backslash escapes whatever byte follows it, so ``\\"`` stays inside the
    string while ``\\\\"`` terminates it.
    """
    index = start
    end = len(data)
    while index < end:
        byte = data[index]
        if byte == BACKSLASH:
            index += 2
            continue
        if byte == QUOTE:
            return index
        index += 1
    return None


def scan_indented_string(data: bytes, start: int = 0) -> int | None:
    """Find the closing ``''`` of an indented string.

    ``'''``, ``''$`` and ``''\\X`` are escapes and never terminate. A ``''``
    at the very end of the buffer does.
    """
    index = start
    end = len(data)
    while index < end:
        if data[index] != APOSTROPHE:
            index += 1
            continue
        if index + 1 >= end:
            return None
        if data[index + 1] != APOSTROPHE:
            index += 1
            continue
        if index + 2 >= end:
            return index
        following = data[index + 2]
        if following == APOSTROPHE or following == DOLLAR:
            index += 3
            continue
        if following == BACKSLASH:
            if index + 3 >= end:
                return None
            index += 4
            continue
        return index
    return None


def skip_trivia(data: bytes, pos: int) -> int:
    """Skip whitespace, ``#`` line comments and ``/* */`` block comments."""
    end = len(data)
    while pos < end:
        byte = data[pos]
        if byte in WHITESPACE:
            pos += 1
        elif byte == HASH:
            newline = data.find(b"\n", pos)
            pos = end if newline == -1 else newline + 1
        elif data.startswith(b"/*", pos):
            close = data.find(b"*/", pos + 2)
            if close == -1:
                raise UnterminatedLiteral(
                    "Unterminated block comment",
                    position=pos,
                    expected=("'*/'",),
                    found=snippet(data, pos),
                )
            pos = close + 2
        else:
            break
    return pos


__all__ = ["scan_indented_string", "scan_string", "skip_trivia"]
