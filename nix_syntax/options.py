from __future__ import annotations

import codecs
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAX_DEPTH = 64

# Each nesting level costs a few Python frames, so the limit stays well below
# the interpreter's default recursion limit.
MAX_DEPTH_LIMIT = 200


class ParserOptions(BaseModel):
    """Tunables shared by every parse entry point."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=MAX_DEPTH_LIMIT)
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value

    @classmethod
    def from_env(cls) -> ParserOptions:
        """Build options from NIX_SYNTAX_* environment variables."""
        values: dict[str, str] = {}
        if max_depth := os.getenv("NIX_SYNTAX_MAX_DEPTH"):
            values["max_depth"] = max_depth
        if encoding := os.getenv("NIX_SYNTAX_ENCODING"):
            values["encoding"] = encoding
        return cls.model_validate(values)


DEFAULT_OPTIONS = ParserOptions()


__all__ = ["DEFAULT_MAX_DEPTH", "DEFAULT_OPTIONS", "MAX_DEPTH_LIMIT", "ParserOptions"]
