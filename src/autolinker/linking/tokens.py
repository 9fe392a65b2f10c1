"""Tokenizing and normalizing words for the term index.

The indexer and the matcher must clean words identically, otherwise a term
indexed from one note would never be found again while typing in another.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

LINK_OPEN = "[["
LINK_CLOSE = "]]"

# Characters stripped from either end of a word; the middle is never touched.
PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()[]"

_EDGE_PUNCTUATION = re.compile(
    rf"^[{re.escape(PUNCTUATION)}]*|[{re.escape(PUNCTUATION)}]*$"
)
_WORD = re.compile(r"\S+")


def split_words(text: str) -> list[str]:
    """Split text on whitespace runs."""
    return text.split()


def iter_words(line: str) -> Iterator[tuple[str, int]]:
    """Yield ``(raw_word, offset)`` for each whitespace-delimited word of a line.

    Offsets come from a left-to-right scan, so a word repeated on one line
    gets the offset of each occurrence rather than the first one.
    """
    for match in _WORD.finditer(line):
        yield match.group(), match.start()


def strip_punctuation(raw_word: str) -> str:
    """Strip punctuation from both ends of a word."""
    return _EDGE_PUNCTUATION.sub("", raw_word)


def normalize(raw_word: str, case_sensitive: bool = False) -> str:
    """Return the index key for a raw word.

    >>> normalize("(Banana),")
    'banana'
    >>> normalize("--")
    ''
    """
    term = strip_punctuation(raw_word)
    return term if case_sensitive else term.lower()


def is_link(raw_word: str) -> bool:
    """Whether the word is (part of) an existing wiki link."""
    return LINK_OPEN in raw_word or LINK_CLOSE in raw_word


def render_link(raw_word: str) -> str:
    return f"{LINK_OPEN}{raw_word}{LINK_CLOSE}"


# Extra characters a rendered link adds around the word.
LINK_OVERHEAD = len(LINK_OPEN) + len(LINK_CLOSE)
