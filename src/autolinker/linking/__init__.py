"""Automatic wiki-linking.

Provides the term index, the match and rewrite engines, undo history,
host protocols, and the AutoLinker instance that ties them together.
"""

from .buffer import TextBuffer
from .history import LinkHistory
from .host import ActiveView, DocumentStore, Editor, MemoryStore, StaticWorkspace, Workspace
from .index import TermIndex
from .matcher import find_matches
from .models import HistoryEntry, Match, Position
from .plugin import AutoLinker
from .rewrite import Rewriter
from .settings import LinkSettings, MemorySettingsStore, SettingsStore, YamlSettingsStore
from .tokens import normalize
from .vault import FileSystemVault

__all__ = [
    "ActiveView",
    "AutoLinker",
    "DocumentStore",
    "Editor",
    "FileSystemVault",
    "HistoryEntry",
    "LinkHistory",
    "LinkSettings",
    "Match",
    "MemorySettingsStore",
    "MemoryStore",
    "Position",
    "Rewriter",
    "SettingsStore",
    "StaticWorkspace",
    "TermIndex",
    "TextBuffer",
    "Workspace",
    "YamlSettingsStore",
    "find_matches",
    "normalize",
]
