from shaderlsp.events import AddToken, ErrorEvent, FinishNode, Placeholder, StartNode
from shaderlsp.parse_error import ParseError
from shaderlsp.syntax_tree import TextRange


def test_start_node_equality():
    assert StartNode("root") == StartNode("root", None)
    assert not StartNode("root") == StartNode("root", 2)
    assert not StartNode("root") == StartNode("other")


def test_unit_events_compare_by_variant():
    assert AddToken() == AddToken()
    assert FinishNode() == FinishNode()
    assert Placeholder() == Placeholder()
    assert not AddToken() == FinishNode()
    assert not Placeholder() == AddToken()


def test_error_events():
    err = ParseError(["a"], None, TextRange(0, 1))
    assert ErrorEvent(err) == ErrorEvent(ParseError(["a"], None, TextRange(0, 1)))
    assert not ErrorEvent(err) == ErrorEvent(ParseError([], None, TextRange(0, 1)))


def test_forward_parent_mutable():
    e = StartNode("x")
    e.forward_parent = 3
    assert e == StartNode("x", 3)