import enum

from shaderlsp.lexer import Lexer, ParserDefinition
from shaderlsp.source import Source


class K(enum.Enum):
    IDENT = enum.auto()
    WS = enum.auto()
    ERROR = enum.auto()


DEF = ParserDefinition([(K.IDENT, r"[a-z]+"), (K.WS, r"\s+")], K.ERROR, trivia={K.WS})


def make(text):
    return Source(list(Lexer(DEF, text)), DEF)


def test_next_token_skips_trivia():
    s = make("  ab  cd ")
    assert s.next_token().text == "ab"
    assert s.next_token().text == "cd"
    assert s.next_token() is None


def test_peek_does_not_consume():
    s = make(" ab")
    assert s.peek_kind() is K.IDENT
    assert s.peek_token().text == "ab"
    assert s.next_token().text == "ab"
    assert s.peek_kind() is None


def test_compound_is_raw_after_trivia():
    s = make(" ab cd")
    assert s.peek_kind_compound() == (K.IDENT, K.WS)
    s.next_token()
    s.next_token()
    assert s.peek_kind_compound() is None


def test_location_advances():
    s = make("a b")
    start = s.location()
    s.next_token()
    assert s.location() != start and s.location() == 1


def test_last_token_range():
    tokens = list(Lexer(DEF, "ab cd"))
    assert Source(tokens, DEF).last_token_range() == tokens[-1].range
    assert make("").last_token_range() is None