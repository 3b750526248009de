"""memories list — browse and search saved memories."""

from __future__ import annotations

import click


@click.command(name="list")
@click.option("--search", "-q", "term", default="", help="Only show memories whose nutshell or date contains this.")
@click.option("--details", "show_details", is_flag=True, help="Show the details under each memory.")
@click.pass_context
def list_memories(ctx: click.Context, term: str, show_details: bool) -> None:
    """Show memories, newest first."""
    from memories.core.cli.common import store_from_context
    from memories.journal.export import format_date
    from memories.journal.prompts import mood_emoji

    store = store_from_context(ctx)
    if not len(store):
        click.echo("No memories yet :( Run 'memories add' to make new ones!")
        return

    # Numbers are store positions, so `memories delete` can use them directly
    positions = {entry.id: i + 1 for i, entry in enumerate(store.entries)}
    matched = store.query(term)
    if not matched:
        click.echo(f"No memories match '{term}'.")
        return

    for entry in reversed(matched):
        click.echo(f"{positions[entry.id]:>3}. {format_date(entry.date)}  {mood_emoji(entry.rating)}  {entry.summary}")
        if show_details:
            details = entry.details if entry.details is not None else store.export_config.missing_details
            click.echo(f"     {details}")
