"""memories delete — remove memories by their list number."""

from __future__ import annotations

import click


@click.command()
@click.argument("positions", nargs=-1, required=True, type=click.IntRange(min=1))
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation.")
@click.pass_context
def delete(ctx: click.Context, positions: tuple[int, ...], yes: bool) -> None:
    """Delete the memories numbered POSITIONS (as shown by `memories list`)."""
    from memories.core.cli.common import store_from_context

    store = store_from_context(ctx)
    indices = sorted({p - 1 for p in positions})
    out_of_range = [i + 1 for i in indices if i >= len(store)]
    if out_of_range:
        raise click.BadParameter(
            f"no memory numbered {', '.join(map(str, out_of_range))} (you have {len(store)})",
            param_hint="POSITIONS",
        )

    if not yes:
        click.confirm(f"Delete {len(indices)} memor{'y' if len(indices) == 1 else 'ies'}?", abort=True)

    removed = store.delete(indices)
    click.echo(f"Deleted {len(removed)} memor{'y' if len(removed) == 1 else 'ies'}.")
