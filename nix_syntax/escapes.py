from __future__ import annotations

_CONTROL_ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}


def unescape_string(raw: str) -> str:
    """Decode the backslash escapes of a double-quoted string body.

    ``\\n``, ``\\r`` and ``\\t`` become control characters; any other escaped
    character stands for itself. Interpolations are left untouched.
    """
    decoded: list[str] = []
    index = 0
    while index < len(raw):
        ch = raw[index]
        if ch == "\\" and index + 1 < len(raw):
            escaped = raw[index + 1]
            decoded.append(_CONTROL_ESCAPES.get(escaped, escaped))
            index += 2
            continue
        decoded.append(ch)
        index += 1
    return "".join(decoded)


def unescape_indented_string(raw: str) -> str:
    """Decode the escapes of an indented string body.

    Indentation is not stripped.
    """
    decoded: list[str] = []
    index = 0
    while index < len(raw):
        if raw.startswith("'''", index):
            decoded.append("''")
            index += 3
        elif raw.startswith("''$", index):
            decoded.append("$")
            index += 3
        elif raw.startswith("''\\", index) and index + 3 < len(raw):
            escaped = raw[index + 3]
            decoded.append(_CONTROL_ESCAPES.get(escaped, escaped))
            index += 4
        else:
            decoded.append(raw[index])
            index += 1
    return "".join(decoded)


__all__ = ["unescape_indented_string", "unescape_string"]
