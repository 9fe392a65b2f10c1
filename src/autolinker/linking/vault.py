"""A directory of markdown notes as a document store."""

from __future__ import annotations

import os
from pathlib import Path

import aiofiles
from loguru import logger

from autolinker.core.exceptions import DocumentReadError, FileIOError


class FileSystemVault:
    """Markdown notes below a root directory.

    Document ids are POSIX paths relative to the root (``"people/ada.md"``),
    the same shape Obsidian uses for ``TFile.path``. Hidden directories such
    as ``.obsidian`` and ``.trash`` are skipped.
    """

    def __init__(self, root: str | Path, extensions: tuple[str, ...] = (".md",)):
        self.root = Path(root).expanduser().resolve()
        self.extensions = extensions

    def list_documents(self) -> list[str]:
        if not self.root.is_dir():
            logger.warning(f"Vault not found: {self.root}")
            return []

        documents: list[str] = []
        for dirpath, dirs, files in os.walk(self.root):
            dirs[:] = sorted(d for d in dirs if not d.startswith("."))
            for name in sorted(files):
                if name.startswith(".") or not name.endswith(self.extensions):
                    continue
                full_path = Path(dirpath) / name
                documents.append(full_path.relative_to(self.root).as_posix())
        return documents

    def path_for(self, document_id: str) -> Path:
        """Resolve a document id to a path, refusing ids that escape the vault."""
        target = (self.root / document_id).resolve()
        try:
            target.relative_to(self.root)
        except ValueError as e:
            raise FileIOError(f"Document path escapes the vault: {document_id}") from e
        return target

    async def read_document(self, document_id: str) -> str:
        try:
            path = self.path_for(document_id)
            async with aiofiles.open(path, encoding="utf-8", errors="replace") as f:
                return await f.read()
        except (OSError, FileIOError) as e:
            raise DocumentReadError(document_id, str(e)) from e

    async def write_document(self, document_id: str, text: str) -> None:
        path = self.path_for(document_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            async with aiofiles.open(path, "w", encoding="utf-8") as f:
                await f.write(text)
        except OSError as e:
            raise FileIOError(f"Cannot write {document_id}: {e}") from e
