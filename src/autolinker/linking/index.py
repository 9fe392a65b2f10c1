"""Term index mapping each term to the document it should link to.

The index is a cache, not a precise live index: a term keeps pointing at
the last document scanned that contained it, and nothing is ever evicted.
:meth:`TermIndex.rebuild` is the only way to drop stale entries.
"""

from __future__ import annotations

from loguru import logger

from autolinker.core.exceptions import DocumentReadError

from .host import DocumentStore
from .settings import LinkSettings
from .tokens import normalize, split_words, strip_punctuation


class TermIndex:
    """Mapping of normalized term to owning document id (last write wins).

    Example::

        index = TermIndex(settings)
        await index.rebuild(FileSystemVault("~/notes"))
        index.get("banana")  # -> "fruit/banana.md"
    """

    def __init__(self, settings: LinkSettings | None = None):
        self.settings = settings or LinkSettings()
        self._terms: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def get(self, term: str) -> str | None:
        return self._terms.get(term)

    def terms(self) -> dict[str, str]:
        """Return a snapshot of the whole mapping."""
        return dict(self._terms)

    def clear(self) -> None:
        self._terms.clear()

    def update(self, text: str, document_id: str) -> int:
        """Index every qualifying word of *text* as owned by *document_id*.

        Returns:
            Number of terms written (overwrites included).
        """
        written = 0
        for word in split_words(text):
            clean = strip_punctuation(word)
            if len(clean) < self.settings.min_word_length or self.settings.is_ignored(clean):
                continue
            self._terms[normalize(word, self.settings.case_sensitive)] = document_id
            written += 1
        return written

    async def scan(self, store: DocumentStore) -> int:
        """Index every document of *store* on top of the current entries.

        Unreadable documents are skipped. Returns the number of documents listed.
        """
        documents = list(store.list_documents())
        for document_id in documents:
            try:
                text = await store.read_document(document_id)
            except (DocumentReadError, OSError) as e:
                logger.warning(f"Skipping {document_id} during scan: {e}")
                continue
            self.update(text, document_id)
        logger.info(f"Scanned {len(documents)} documents, {len(self._terms)} terms indexed")
        return len(documents)

    async def rebuild(self, store: DocumentStore) -> int:
        """Clear the index and scan *store* from scratch."""
        self.clear()
        return await self.scan(store)
