"""Linking settings and their persistence.

Settings on disk are untrusted: they may be partial, stale, or hand-edited.
:meth:`LinkSettings.from_mapping` overlays whatever is usable onto the
defaults one field at a time.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Protocol, runtime_checkable

import yaml
from loguru import logger

from autolinker.core.exceptions import ConfigurationError
from autolinker.core.utils.file_io import read_text, safe_write

DEFAULT_MIN_WORD_LENGTH = 3
DEFAULT_IGNORED_WORDS = ("the", "and", "but", "for")

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


def parse_min_word_length(value: Any) -> int:
    """Parse a minimum word length, falling back to the default.

    Accepts ints and numeric strings ("5", " 4 "). Anything that is not a
    positive integer yields ``DEFAULT_MIN_WORD_LENGTH``.
    """
    if isinstance(value, bool):
        return DEFAULT_MIN_WORD_LENGTH
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_MIN_WORD_LENGTH
    return parsed if parsed >= 1 else DEFAULT_MIN_WORD_LENGTH


def parse_ignored_words(value: Any) -> list[str]:
    """Parse ignored words from a list or a comma-separated string."""
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = [str(item) for item in value]
    else:
        raise ValueError(f"Unsupported ignored words value: {value!r}")
    return [item.strip() for item in items if item.strip()]


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS:
        return True
    if isinstance(value, str) and value.strip().lower() in _FALSE_STRINGS:
        return False
    raise ValueError(f"Not a boolean: {value!r}")


@dataclass
class LinkSettings:
    """Settings read by every linking operation.

    Attributes:
        min_word_length: Shortest cleaned word considered for indexing and linking.
        ignored_words: Words never indexed or linked (compared case-insensitively).
        case_sensitive: Keep the case of terms instead of lower-casing them.
        scan_on_load: Scan the whole vault when the linker loads.
        auto_link_enabled: Rewrite words while typing and on paste.
    """

    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    ignored_words: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_WORDS))
    case_sensitive: bool = False
    scan_on_load: bool = True
    auto_link_enabled: bool = True

    def is_ignored(self, clean_word: str) -> bool:
        """Whether *clean_word* is on the ignore list.

        Both sides are lower-cased, so an entry typed as ``"The"`` also
        ignores ``"the"``, even when ``case_sensitive`` is set.
        """
        return clean_word.lower() in {word.lower() for word in self.ignored_words}

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Any, base: LinkSettings | None = None) -> LinkSettings:
        """Overlay untrusted data onto *base* (the defaults when omitted).

        Unknown keys are ignored. A field whose value cannot be parsed keeps
        its value from *base* and a warning is logged. *base* is not modified.
        """
        settings = cls(**base.to_dict()) if base is not None else cls()
        if not data:
            return settings
        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings of type {type(data).__name__}")
            return settings

        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            if key not in known:
                logger.debug(f"Ignoring unknown setting {key!r}")
                continue
            try:
                if key == "min_word_length":
                    parsed: Any = parse_min_word_length(value)
                elif key == "ignored_words":
                    parsed = parse_ignored_words(value)
                else:
                    parsed = _parse_bool(value)
            except ValueError as e:
                logger.warning(f"Invalid value for setting {key!r}, keeping current value: {e}")
                continue
            setattr(settings, key, parsed)
        return settings


@runtime_checkable
class SettingsStore(Protocol):
    """Persistence for :class:`LinkSettings`."""

    def load(self) -> dict[str, Any]:
        """Return persisted settings data (possibly partial, possibly empty)."""
        ...

    def save(self, settings: LinkSettings) -> None:
        """Persist the full settings."""
        ...


class YamlSettingsStore:
    """Settings stored as a YAML mapping in a single file."""

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def load(self) -> dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            data = yaml.safe_load(read_text(self.path)) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid settings file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {self.path} must contain a mapping")
        return data

    def save(self, settings: LinkSettings) -> None:
        safe_write(self.path, yaml.safe_dump(settings.to_dict(), sort_keys=False))
        logger.debug(f"Saved settings to {self.path}")


class MemorySettingsStore:
    """Settings kept in memory; handy for tests and embedding."""

    def __init__(self, data: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(data or {})
        self.saves = 0

    def load(self) -> dict[str, Any]:
        return dict(self.data)

    def save(self, settings: LinkSettings) -> None:
        self.data = settings.to_dict()
        self.saves += 1
