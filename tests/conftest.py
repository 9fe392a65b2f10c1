"""Shared test fixtures for autolinker."""

import os
import tempfile

import pytest

from autolinker.linking import MemoryStore, StaticWorkspace, TextBuffer
from autolinker.linking.plugin import AutoLinker
from autolinker.linking.settings import MemorySettingsStore


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file pointing at a temporary settings file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "settings_file": os.path.join(tmp_dir, "data", "settings.yaml"),
        },
        "logging": {"level": "ERROR"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def vault_dir(tmp_dir):
    """A small vault of markdown notes on disk."""
    notes = {
        "apple.md": "The Banana Tree",
        "people/ada.md": "Ada wrote about engines.",
        "other.md": "I love banana bread",
        ".obsidian/workspace.md": "hidden config mentioning banana",
        "attachments/photo.png": "not a note",
    }
    root = os.path.join(tmp_dir, "vault")
    for rel_path, text in notes.items():
        path = os.path.join(root, rel_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    return root


@pytest.fixture
def notices():
    """Collects user-visible notices."""
    return []


@pytest.fixture
def linker(notices):
    """An AutoLinker over an in-memory vault with ``apple.md`` indexed."""
    store = MemoryStore({"apple.md": "The Banana Tree"})
    instance = AutoLinker(
        workspace=StaticWorkspace(),
        store=store,
        settings_store=MemorySettingsStore(),
        notify=notices.append,
    )
    instance.index.update("The Banana Tree", "apple.md")
    return instance


@pytest.fixture
def other_buffer(linker):
    """``other.md`` open in the linker's workspace with the cursor at line end."""
    buffer = TextBuffer("I love banana bread")
    buffer.set_cursor(0, 19)
    linker.workspace.open("other.md", buffer)
    return buffer
