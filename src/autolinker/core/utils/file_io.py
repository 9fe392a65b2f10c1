"""File I/O helpers. All functions operate on explicit paths."""

from __future__ import annotations

import os

from autolinker.core.exceptions import FileIOError


def safe_write(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    try:
        os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
        with open(filepath, mode, encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise FileIOError(f"Cannot write {filepath}: {e}") from e


def read_text(filepath: str, encoding: str = "utf-8") -> str:
    """Read a text file, wrapping OS errors in FileIOError."""
    try:
        with open(filepath, encoding=encoding) as f:
            return f.read()
    except OSError as e:
        raise FileIOError(f"Cannot read {filepath}: {e}") from e
