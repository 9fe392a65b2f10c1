"""Finding linkable words in a line of text."""

from __future__ import annotations

from .index import TermIndex
from .models import Match, Position
from .settings import LinkSettings
from .tokens import is_link, iter_words, normalize, strip_punctuation


def find_matches(
    line: str,
    line_number: int,
    current_document_id: str,
    index: TermIndex,
    settings: LinkSettings,
    column: int = 0,
) -> list[Match]:
    """Return the words of *line* that should become links, left to right.

    A word qualifies when its cleaned form is long enough and not ignored,
    its normalized term is in the index, the owning document is not the
    one being edited, and the word is not already part of a link.

    Args:
        line: Text of the line (or of a fragment of it).
        line_number: Buffer line the text sits on.
        current_document_id: Id of the document being edited.
        index: Term index to resolve against.
        settings: Length, ignore and case settings.
        column: Buffer column where *line* starts, for fragments pasted mid-line.
    """
    matches: list[Match] = []
    for raw_word, offset in iter_words(line):
        clean = strip_punctuation(raw_word)
        if len(clean) < settings.min_word_length or settings.is_ignored(clean):
            continue

        term = normalize(raw_word, settings.case_sensitive)
        target = index.get(term)
        if target is None or target == current_document_id or is_link(raw_word):
            continue

        start = column + offset
        matches.append(
            Match(
                term=term,
                raw_word=raw_word,
                start=Position(line_number, start),
                end=Position(line_number, start + len(raw_word)),
                target=target,
            )
        )
    return matches
