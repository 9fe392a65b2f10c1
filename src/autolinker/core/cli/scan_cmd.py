"""autolinker scan — index a vault and report its terms."""

from __future__ import annotations

import asyncio

import click


@click.command()
@click.option("--vault", "-v", "vault", default=None, help="Vault directory.")
@click.option("--show-terms", is_flag=True, help="List every term with the note that owns it.")
@click.pass_obj
def scan(obj: dict, vault: str | None, show_terms: bool) -> None:
    """Scan a vault for terms that can be linked."""
    from .common import build_linker, resolve_vault

    config = obj["config"]
    linker = build_linker(config, resolve_vault(config, vault))
    asyncio.run(linker.rebuild_index())

    click.echo(f"{len(linker.index)} terms indexed")
    if show_terms:
        for term, document_id in sorted(linker.index.terms().items()):
            click.echo(f"{term}\t{document_id}")
