"""memories export — take your memories elsewhere as plain text."""

from __future__ import annotations

import click


@click.command()
@click.argument("output", required=False, type=click.Path(dir_okay=False))
@click.pass_context
def export(ctx: click.Context, output: str | None) -> None:
    """Write all memories as text to OUTPUT, or to stdout."""
    from memories.core.cli.common import store_from_context
    from memories.core.exceptions import FileIOError
    from memories.core.utils.file_io import safe_write_with_backup

    store = store_from_context(ctx)
    text = store.export()

    if output is None:
        click.echo(text, nl=False)
        return

    try:
        backup = safe_write_with_backup(output, text)
    except FileIOError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Exported {len(store)} memories to {output}")
    if backup:
        click.echo(f"Previous export kept at {backup}")
