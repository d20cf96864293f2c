import pytest
from pydantic import ValidationError

from nix_syntax.options import DEFAULT_MAX_DEPTH, ParserOptions


def test_default_options():
    options = ParserOptions()
    assert options.max_depth == DEFAULT_MAX_DEPTH
    assert options.encoding == "utf-8"


@pytest.mark.parametrize("max_depth", [0, -1, 201])
def test_max_depth_bounds(max_depth):
    """The depth limit stays within what the call stack can hold."""
    with pytest.raises(ValidationError):
        ParserOptions(max_depth=max_depth)


def test_unknown_encoding():
    with pytest.raises(ValidationError):
        ParserOptions(encoding="no-such-codec")


def test_options_are_frozen():
    options = ParserOptions()
    with pytest.raises(ValidationError):
        options.max_depth = 3


def test_options_from_env(monkeypatch):
    monkeypatch.setenv("NIX_SYNTAX_MAX_DEPTH", "12")
    monkeypatch.setenv("NIX_SYNTAX_ENCODING", "latin-1")
    options = ParserOptions.from_env()
    assert options.max_depth == 12
    assert options.encoding == "latin-1"


def test_options_from_env_defaults(monkeypatch):
    monkeypatch.delenv("NIX_SYNTAX_MAX_DEPTH", raising=False)
    monkeypatch.delenv("NIX_SYNTAX_ENCODING", raising=False)
    assert ParserOptions.from_env() == ParserOptions()


def test_options_from_env_invalid(monkeypatch):
    monkeypatch.setenv("NIX_SYNTAX_MAX_DEPTH", "deep")
    with pytest.raises(ValidationError):
        ParserOptions.from_env()
