import pytest

from nix_syntax.exceptions import (IncompleteInput, NestingTooDeep,
                                   StructuralMismatch, UnclosedAttrSet,
                                   UnterminatedLiteral)
from nix_syntax.expressions.binding import Binding
from nix_syntax.expressions.expression import ParseResult
from nix_syntax.expressions.identifier import Identifier
from nix_syntax.expressions.indented_string import IndentedString
from nix_syntax.expressions.set import AttrSet
from nix_syntax.expressions.string import NixString
from nix_syntax.options import ParserOptions
from nix_syntax.parser import parse, parse_attr_set


def a(*bindings, recursive=False):
    return AttrSet(bindings=bindings, recursive=recursive)


def b(name, value):
    attrpath = tuple(Identifier(name=part) for part in name.split("."))
    return Binding(attrpath=attrpath, value=value)


def test_attr_set_parse():
    """A set holding a single identifier consumes all input."""
    assert parse_attr_set(b"{test}") == ParseResult(a(Identifier(name="test")), b"")


@pytest.mark.parametrize("source", [b"{}", b"{ }", b"{\n}", b"{ # nothing\n}"])
def test_empty_attr_set(source):
    assert parse_attr_set(source).node == a()


def test_nested_attr_sets():
    """Sets nest to the depth written in the source."""
    assert parse_attr_set(b"{ {test} }").node == a(a(Identifier(name="test")))
    assert parse_attr_set(b"{{{x}}}").node == a(a(a(Identifier(name="x"))))


def test_attr_set_preserves_source_order():
    """Members stay in the order they were written."""
    node = parse_attr_set(b'{ c "b" \'\'a\'\' {} }').node
    assert node.bindings == (
        Identifier(name="c"),
        NixString(text="b"),
        IndentedString(text="a"),
        a(),
    )


def test_attr_set_string_may_contain_braces():
    """Braces inside literals do not close the set."""
    assert parse_attr_set(b'{ "}" }').node == a(NixString(text="}"))


def test_attr_set_remainder():
    assert parse_attr_set(b"{test} rest").remainder == b" rest"


@pytest.mark.parametrize(
    "source", [b"{", b"{test", b"{ {test}", b"{{test}", b"{ a = ", b"{ a = b", b"{ a.", b"{ a"]
)
def test_attr_set_unclosed(source):
    """Running out of input before '}' never succeeds on a prefix."""
    with pytest.raises(UnclosedAttrSet) as excinfo:
        parse_attr_set(source)
    assert isinstance(excinfo.value, IncompleteInput)
    assert excinfo.value.position == len(source)


def test_attr_set_requires_opening_brace():
    with pytest.raises(StructuralMismatch):
        parse_attr_set(b"test")


def test_attr_set_propagates_member_failure():
    """The first failing member surfaces unchanged."""
    with pytest.raises(StructuralMismatch) as excinfo:
        parse_attr_set(b"{test]")
    assert excinfo.value.position == 5
    with pytest.raises(UnterminatedLiteral):
        parse_attr_set(b'{ "abc }')


def test_attr_set_bindings():
    """Bindings pair an attribute path with a value."""
    assert parse_attr_set(b'{ name = "promo"; }').node == a(
        b("name", NixString(text="promo"))
    )


def test_attr_set_multiple_bindings():
    source = b"""
{
  name = "promo";

  buildPhase = ''
    SECRET_KEY_BASE=tempfnord rake assets:precompile
    mv config config.dist
  '';

  meta = { homepage = "https://example.org"; };
}
""".strip()
    node = parse_attr_set(source).node
    assert [binding.name for binding in node.bindings] == ["name", "buildPhase", "meta"]
    assert node.bindings[1].value == IndentedString(
        text="\n    SECRET_KEY_BASE=tempfnord rake assets:precompile\n"
        "    mv config config.dist\n  "
    )
    assert node.bindings[2].value == a(
        b("homepage", NixString(text="https://example.org"))
    )


def test_attr_set_attrpath_binding():
    """Dotted paths may mix identifiers and quoted attributes."""
    node = parse_attr_set(b'{ a.b."c d" = x; }').node
    binding = node.bindings[0]
    assert binding.attrpath == (
        Identifier(name="a"),
        Identifier(name="b"),
        NixString(text="c d"),
    )
    assert binding.name == "a.b.c d"
    assert binding.value == Identifier(name="x")


def test_attr_set_string_binding_name():
    node = parse_attr_set(b'{ "with space" = y; }').node
    assert node.bindings[0].attrpath == (NixString(text="with space"),)


def test_attr_set_mixes_bindings_and_expressions():
    node = parse_attr_set(b"{ a = b; c }").node
    assert node == a(b("a", Identifier(name="b")), Identifier(name="c"))


@pytest.mark.parametrize(
    "source,expected",
    [
        (b"{ a = b }", "';'"),
        (b"{ a = ; }", "identifier"),
        (b"{ a.b }", "'='"),
    ],
)
def test_attr_set_malformed_binding(source, expected):
    """A broken binding reports what it expected."""
    with pytest.raises(StructuralMismatch) as excinfo:
        parse_attr_set(source)
    assert expected in excinfo.value.expected


def test_recursive_attr_set():
    assert parse_attr_set(b"rec { a = b; }").node == a(
        b("a", Identifier(name="b")), recursive=True
    )
    assert parse_attr_set(b"rec{}").node == a(recursive=True)


def test_rec_without_brace_is_an_identifier():
    """'rec' only acts as a keyword in front of a set."""
    assert parse(b"rec") == Identifier(name="rec")
    assert parse(b"record") == Identifier(name="record")
    assert parse(b"{ rec }") == a(Identifier(name="rec"))


def test_attr_set_comments_are_trivia():
    node = parse_attr_set(b"{ # leading\n test /* inline */ }").node
    assert node == a(Identifier(name="test"))


def test_attr_set_depth_limit():
    """Nesting beyond max_depth fails deterministically."""
    options = ParserOptions(max_depth=2)
    assert parse_attr_set(b"{{a}}", options).node == a(a(Identifier(name="a")))
    with pytest.raises(NestingTooDeep) as excinfo:
        parse_attr_set(b"{{{a}}}", options)
    assert excinfo.value.position == 2


def test_attr_set_adversarial_nesting():
    """Deeply nested input stops at the default limit instead of the stack."""
    with pytest.raises(NestingTooDeep):
        parse_attr_set(b"{" * 10_000 + b"}" * 10_000)
