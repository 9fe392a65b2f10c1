"""Tests for autolinker.linking.buffer."""

import pytest

from autolinker.linking import Editor, Position, TextBuffer


def test_satisfies_editor_protocol():
    assert isinstance(TextBuffer(), Editor)


def test_lines_and_text():
    buffer = TextBuffer("one\ntwo\n")
    assert buffer.line_count == 3
    assert buffer.get_line(1) == "two"
    assert buffer.text == "one\ntwo\n"


def test_replace_within_line():
    buffer = TextBuffer("I love banana bread")
    buffer.replace_range("[[banana]]", Position(0, 7), Position(0, 13))
    assert buffer.text == "I love [[banana]] bread"
    assert buffer.version == 1


def test_replace_across_lines():
    buffer = TextBuffer("alpha\nbeta\ngamma")
    buffer.replace_range("X", Position(0, 2), Position(2, 3))
    assert buffer.text == "alXma"


def test_replacement_with_newlines_splits_lines():
    buffer = TextBuffer("ab")
    buffer.replace_range("1\n2", Position(0, 1), Position(0, 1))
    assert buffer.text == "a1\n2b"
    assert buffer.line_count == 2


def test_get_range():
    buffer = TextBuffer("alpha\nbeta\ngamma")
    assert buffer.get_range(Position(0, 1), Position(0, 3)) == "lp"
    assert buffer.get_range(Position(0, 3), Position(2, 2)) == "ha\nbeta\nga"


def test_insert_moves_cursor():
    buffer = TextBuffer("ab")
    buffer.set_cursor(0, 1)
    start = buffer.insert("x\nyz")
    assert start == Position(0, 1)
    assert buffer.text == "ax\nyzb"
    assert buffer.get_cursor() == Position(1, 2)


def test_line_out_of_range():
    with pytest.raises(IndexError):
        TextBuffer("one").get_line(1)


def test_reversed_range_rejected():
    with pytest.raises(ValueError):
        TextBuffer("abc").replace_range("x", Position(0, 2), Position(0, 1))
