import enum

import pytest

from shaderlsp.syntax_tree import (
    Direction,
    GreenNodeBuilder,
    SyntaxNode,
    SyntaxToken,
    TextRange,
)


class K(enum.Enum):
    ROOT = enum.auto()
    BIN = enum.auto()
    IDENT = enum.auto()
    WS = enum.auto()
    NUMBER = enum.auto()
    PLUS = enum.auto()


def build():
    b = GreenNodeBuilder()
    b.start_node(K.ROOT)
    b.token(K.IDENT, "foo")
    b.token(K.WS, " ")
    b.start_node(K.BIN)
    b.token(K.NUMBER, "1")
    b.token(K.PLUS, "+")
    b.token(K.NUMBER, "2")
    b.finish_node()
    b.finish_node()
    return SyntaxNode.new_root(b.finish())


def test_text_range_helpers():
    r = TextRange.at(2, 3)
    assert (r.start, r.end, r.length) == (2, 5, 3)
    assert TextRange.empty(4).is_empty()
    assert r.contains_range(TextRange(3, 5))
    assert not r.contains_range(TextRange(1, 3))
    assert r.intersect(TextRange(4, 9)) == TextRange(4, 5)
    assert r.intersect(TextRange(6, 9)) is None
    with pytest.raises(ValueError):
        TextRange(3, 1)


def test_root_text_and_range():
    root = build()
    assert root.text() == "foo 1+2"
    assert root.text_range() == TextRange(0, len("foo 1+2"))
    assert root.parent() is None


def test_children_and_ranges_match_text():
    root = build()
    text = root.text()
    for el in root.children_with_tokens():
        r = el.text_range()
        content = el.text if isinstance(el, SyntaxToken) else el.text()
        assert text[r.start:r.end] == content
    assert [c.kind for c in root.children()] == [K.BIN]


def test_token_at_offset():
    root = build()
    (single,) = root.token_at_offset(1)
    assert single.text == "foo"
    left, right = root.token_at_offset(3)
    assert (left.text, right.text) == ("foo", " ")
    with pytest.raises(ValueError):
        root.token_at_offset(100)


def test_ancestors_and_navigation():
    root = build()
    (tok,) = root.token_at_offset(6) if False else (list(root.descendant_tokens())[3],)
    assert tok.text == "+"
    assert [n.kind for n in tok.parent_ancestors()] == [K.BIN, K.ROOT]
    assert tok.next_token().text == "2"
    assert tok.prev_token().text == "1"
    first = list(root.descendant_tokens())[0]
    assert first.prev_token() is None


def test_siblings():
    root = build()
    bin_node = next(root.children())
    prev = list(bin_node.siblings_with_tokens(Direction.PREV))
    assert [e.kind for e in prev] == [K.BIN, K.WS, K.IDENT]
    assert list(bin_node.siblings(Direction.NEXT)) == [bin_node]


def test_covering_element():
    root = build()
    el = root.covering_element(TextRange(4, 5))
    assert isinstance(el, SyntaxToken) and el.text == "1"
    node = root.covering_element(TextRange(4, 7))
    assert node.kind is K.BIN
    assert root.covering_element(TextRange(0, 7)) == root


def test_debug_string():
    dump = build().debug_string()
    lines = dump.splitlines()
    assert dump.endswith("\n")
    assert lines[0] == "ROOT@0..7"
    assert len(lines) == 7
    assert lines[1].startswith("  IDENT@0..3")


def test_builder_errors():
    b = GreenNodeBuilder()
    with pytest.raises(ValueError):
        b.finish_node()
    b.start_node(K.ROOT)
    with pytest.raises(ValueError):
        b.finish()