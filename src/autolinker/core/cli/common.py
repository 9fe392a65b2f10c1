"""Shared setup logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from autolinker.core.config import Config
from autolinker.core.utils.logging import setup_logging
from autolinker.linking import AutoLinker, FileSystemVault, StaticWorkspace, YamlSettingsStore
from autolinker.linking.host import DocumentStore

AUTOLINKER_DIR = Path.home() / ".autolinker"
CONFIG_PATH = AUTOLINKER_DIR / "config.yaml"


def load_config(config_file: str | None = None) -> Config:
    """Load config from *config_file*, or ~/.autolinker/config.yaml."""
    return Config(config_file=str(config_file or CONFIG_PATH), data_dir=str(AUTOLINKER_DIR))


def configure_logging(config: Config, level: str | None = None) -> None:
    setup_logging(
        level=level or config.get("logging.level", "WARNING"),
        log_file=config.get_path("logging.file") or None,
    )


def echo_notice(message: str) -> None:
    """Show linker notices on stderr so stdout stays clean for note text."""
    click.echo(message, err=True)


def resolve_vault(config: Config, vault: str | None) -> FileSystemVault:
    """Use the --vault option, else ``vault.path`` from the config."""
    path = vault or config.get_path("vault.path")
    if not path:
        raise click.UsageError("No vault given. Pass --vault or set vault.path in the config.")
    if not Path(path).expanduser().is_dir():
        raise click.UsageError(f"Vault not found: {path}")
    return FileSystemVault(path)


def build_linker(config: Config, store: DocumentStore) -> AutoLinker:
    """Create an AutoLinker with settings from ``paths.settings_file``."""
    linker = AutoLinker(
        workspace=StaticWorkspace(),
        store=store,
        settings_store=YamlSettingsStore(config.get_path("paths.settings_file")),
        notify=echo_notice,
    )
    linker.load_settings()
    return linker
