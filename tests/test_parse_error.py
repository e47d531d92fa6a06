import enum

from shaderlsp.parse_error import ParseError
from shaderlsp.syntax_tree import TextRange


class K(enum.Enum):
    IDENT = enum.auto()
    NUMBER = enum.auto()
    PLUS = enum.auto()


def test_message_single_with_found():
    e = ParseError([K.IDENT], K.NUMBER, TextRange(0, 1))
    assert e.message() == "expected IDENT, but found NUMBER"


def test_message_several():
    e = ParseError([K.IDENT, K.NUMBER, K.PLUS], None, TextRange(0, 1))
    assert e.message() == "expected IDENT, NUMBER or PLUS"


def test_display():
    e = ParseError([K.IDENT, K.PLUS], None, TextRange(3, 5))
    assert str(e) == "error at 3..5: expected IDENT or PLUS"


def test_display_extends_message():
    for expected in ([], [K.IDENT], [K.IDENT, K.NUMBER]):
        e = ParseError(expected, K.PLUS, TextRange(2, 4))
        assert str(e) == "error at 2..4: " + e.message()


def test_equality():
    a = ParseError([K.IDENT], None, TextRange(0, 1))
    assert a == ParseError([K.IDENT], None, TextRange(0, 1))
    assert not a == ParseError([K.IDENT], K.PLUS, TextRange(0, 1))