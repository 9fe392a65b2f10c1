"""Tests for autolinker.linking.rewrite."""

import pytest

from autolinker.linking import ActiveView, HistoryEntry, LinkHistory, Position, Rewriter, TermIndex, TextBuffer
from autolinker.linking.matcher import find_matches
from autolinker.linking.settings import LinkSettings


@pytest.fixture
def index():
    index = TermIndex()
    index.update("The Banana Tree", "apple.md")
    return index


@pytest.fixture
def notices():
    return []


@pytest.fixture
def rewriter(notices):
    return Rewriter(LinkHistory(), notify=notices.append)


def _matches(buffer, index, line=0, document_id="other.md"):
    return find_matches(buffer.get_line(line), line, document_id, index, LinkSettings())


class TestApplyMatch:
    def test_wraps_word_and_records_history(self, rewriter, index, notices):
        buffer = TextBuffer("I love banana bread")
        (match,) = _matches(buffer, index)

        assert rewriter.apply_match(match, buffer, "other.md")
        assert buffer.text == "I love [[banana]] bread"
        assert rewriter.history.entries() == [
            HistoryEntry(text="banana", position=Position(0, 7), file="other.md")
        ]
        assert notices == ['Linked "banana" to apple.md']

    def test_stale_span_is_skipped(self, rewriter, index, notices):
        buffer = TextBuffer("I love banana bread")
        (match,) = _matches(buffer, index)
        buffer.replace_range("I really ", Position(0, 0), Position(0, 2))

        assert not rewriter.apply_match(match, buffer, "other.md")
        assert buffer.text == "I really love banana bread"
        assert len(rewriter.history) == 0
        assert notices == []

    def test_missing_line_is_skipped(self, rewriter, index):
        buffer = TextBuffer("banana")
        (match,) = _matches(buffer, index)
        moved = type(match)(match.term, match.raw_word, Position(5, 0), Position(5, 6), match.target)
        assert not rewriter.apply_match(moved, buffer, "other.md")


class TestApplyMatches:
    def test_later_spans_shift_past_new_markers(self, rewriter, index):
        buffer = TextBuffer("banana and tree and banana")
        applied = rewriter.apply_matches(_matches(buffer, index), buffer, "other.md")

        assert len(applied) == 3
        assert buffer.text == "[[banana]] and [[tree]] and [[banana]]"
        assert [e.position.ch for e in rewriter.history.entries()] == [0, 15, 28]

    def test_undo_all_restores_line(self, rewriter, index):
        original = "banana and tree and banana"
        buffer = TextBuffer(original)
        rewriter.apply_matches(_matches(buffer, index), buffer, "other.md")

        view = ActiveView("other.md", buffer)
        while rewriter.undo(view):
            pass
        assert buffer.text == original


class TestUndo:
    def test_round_trip(self, rewriter, index, notices):
        buffer = TextBuffer("I love banana bread")
        rewriter.apply_matches(_matches(buffer, index), buffer, "other.md")

        entry = rewriter.undo(ActiveView("other.md", buffer))
        assert entry.text == "banana"
        assert buffer.text == "I love banana bread"
        assert len(rewriter.history) == 0
        assert notices[-1] == "Undid last auto-link"

    def test_empty_history_is_noop(self, rewriter, notices):
        buffer = TextBuffer("unchanged")
        assert rewriter.undo(ActiveView("other.md", buffer)) is None
        assert buffer.text == "unchanged"
        assert notices == []

    def test_no_active_view_keeps_history(self, rewriter, index):
        buffer = TextBuffer("banana")
        rewriter.apply_matches(_matches(buffer, index), buffer, "other.md")
        assert rewriter.undo(None) is None
        assert len(rewriter.history) == 1

    def test_other_document_keeps_entry(self, rewriter, index):
        buffer = TextBuffer("banana")
        rewriter.apply_matches(_matches(buffer, index), buffer, "other.md")

        elsewhere = TextBuffer("banana")
        assert rewriter.undo(ActiveView("third.md", elsewhere)) is None
        assert elsewhere.text == "banana"
        assert len(rewriter.history) == 1

        # still undoable from the document it belongs to
        assert rewriter.undo(ActiveView("other.md", buffer)) is not None
        assert buffer.text == "banana"

    def test_moved_link_drops_entry(self, rewriter, index):
        buffer = TextBuffer("banana")
        rewriter.apply_matches(_matches(buffer, index), buffer, "other.md")
        buffer.replace_range("so ", Position(0, 0), Position(0, 0))

        assert rewriter.undo(ActiveView("other.md", buffer)) is None
        assert buffer.text == "so [[banana]]"
        assert len(rewriter.history) == 0
