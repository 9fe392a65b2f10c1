"""autolinker link — link every indexed term in one note."""

from __future__ import annotations

import asyncio

import click

from autolinker.core.exceptions import AutolinkerError


@click.command()
@click.argument("note")
@click.option("--vault", "-v", "vault", default=None, help="Vault directory.")
@click.option("--dry-run", is_flag=True, help="Print the linked note instead of saving it.")
@click.pass_obj
def link(obj: dict, note: str, vault: str | None, dry_run: bool) -> None:
    """Link the words of NOTE (a path inside the vault) to the notes that own them."""
    from .common import build_linker, resolve_vault

    config = obj["config"]
    store = resolve_vault(config, vault)
    linker = build_linker(config, store)
    try:
        asyncio.run(_link_note(linker, store, note, dry_run))
    except AutolinkerError as e:
        raise click.ClickException(str(e)) from e


async def _link_note(linker, store, note: str, dry_run: bool) -> None:  # type: ignore[no-untyped-def]
    from autolinker.linking import TextBuffer

    await linker.rebuild_index()
    buffer = TextBuffer(await store.read_document(note))
    linker.workspace.open(note, buffer)

    count = await linker.link_all_lines(buffer, buffer.line_count)
    if dry_run:
        click.echo(buffer.text)
    elif count:
        await store.write_document(note, buffer.text)
    click.echo(f"Linked {count} words in {note}", err=True)
