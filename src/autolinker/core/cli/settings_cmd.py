"""autolinker settings / toggle — inspect and change linking settings."""

from __future__ import annotations

import asyncio

import click
import yaml

from autolinker.core.exceptions import ConfigurationError


@click.command()
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Change a setting, e.g. --set min_word_length=4 --set ignored_words=the,and",
)
@click.pass_obj
def settings(obj: dict, assignments: tuple[str, ...]) -> None:
    """Show (or change) the linking settings."""
    from autolinker.linking import MemoryStore

    from .common import build_linker

    linker = build_linker(obj["config"], MemoryStore())
    if assignments:
        values = {}
        for assignment in assignments:
            key, sep, value = assignment.partition("=")
            if not sep:
                raise click.BadParameter(f"Expected KEY=VALUE, got {assignment!r}", param_hint="--set")
            values[key.strip()] = value
        try:
            asyncio.run(linker.update_settings(**values))
        except ConfigurationError as e:
            raise click.ClickException(str(e)) from e

    click.echo(yaml.safe_dump(linker.settings.to_dict(), sort_keys=False).rstrip())


@click.command()
@click.pass_obj
def toggle(obj: dict) -> None:
    """Turn automatic linking on or off."""
    from autolinker.linking import MemoryStore

    from .common import build_linker

    linker = build_linker(obj["config"], MemoryStore())
    asyncio.run(linker.toggle_auto_linking())
