import pytest

from shaderlsp.line_index import LineEndings, LineIndex, OffsetEncoding


def test_normalize_unix_text_is_untouched():
    text = "fn main() {\n}\n"
    normalized, endings = LineEndings.normalize(text)
    assert normalized == text
    assert endings is LineEndings.UNIX


def test_normalize_dos_text_removes_carriage_returns():
    text = "a\r\nbb\r\nccc\r\n"
    normalized, endings = LineEndings.normalize(text)
    assert endings is LineEndings.DOS
    assert "\r\n" not in normalized
    assert len(normalized) == len(text) - text.count("\r\n")
    assert normalized.splitlines() == text.splitlines()


def test_normalize_lone_carriage_return_is_dos_but_kept():
    text = "a\rb"
    normalized, endings = LineEndings.normalize(text)
    assert endings is LineEndings.DOS
    assert normalized == text


def test_normalize_double_carriage_return():
    normalized, endings = LineEndings.normalize("\r\r\n")
    assert normalized == "\r\n"
    assert endings is LineEndings.DOS


@pytest.mark.parametrize("encoding", list(OffsetEncoding))
def test_line_col_round_trip(encoding):
    text = "let a = 1;\nlet bé = \"😀x\";\n\nend"
    index = LineIndex(text, encoding=encoding)
    for offset in range(len(text) + 1):
        line, col = index.line_col(offset)
        assert index.offset(line, col) == offset


def test_line_col_counts_lines():
    text = "one\ntwo\nthree"
    index = LineIndex(text)
    assert index.line_col(text.index("three"))[0] == text[: text.index("three")].count("\n")
    assert index.line_col(text.index("three"))[1] == 0


def test_utf16_and_utf8_columns_differ_for_astral_characters():
    text = "😀x"
    utf8 = LineIndex(text, encoding=OffsetEncoding.UTF8)
    utf16 = LineIndex(text, encoding=OffsetEncoding.UTF16)
    assert utf16.line_col(1) == (0, 2)
    assert utf8.line_col(1) == (0, 4)


def test_invalid_positions_raise():
    index = LineIndex("ab\ncd")
    with pytest.raises(ValueError):
        index.offset(5, 0)
    with pytest.raises(ValueError):
        index.offset(0, 10)
    with pytest.raises(ValueError):
        index.line_col(100)


def test_position_inside_a_multibyte_character_is_invalid():
    index = LineIndex("é", encoding=OffsetEncoding.UTF8)
    with pytest.raises(ValueError):
        index.offset(0, 1)