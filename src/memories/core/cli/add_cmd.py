"""memories add — record how today went."""

from __future__ import annotations

import click

from memories.journal.models import MAX_RATING, MIN_RATING, SUMMARY_MAX_LENGTH, summary_length


@click.command()
@click.option(
    "--rating",
    "-r",
    type=click.IntRange(MIN_RATING, MAX_RATING),
    prompt=f"How was your day? ({MIN_RATING}-{MAX_RATING})",
    help="1 = rough day, 5 = best day ever.",
)
@click.option("--summary", "-s", prompt="Tell about your day in a nutshell", help="One line about your day.")
@click.option("--details", "-d", default=None, help="Anything else you want to remember.")
@click.pass_context
def add(ctx: click.Context, rating: int, summary: str, details: str | None) -> None:
    """Save a new memory."""
    from memories.core.cli.common import store_from_context
    from memories.core.exceptions import InvalidEntryError
    from memories.journal.models import MemoryEntry
    from memories.journal.prompts import encouraging_message, motivational_message

    if not summary:
        raise click.UsageError("Please tell about your day in a nutshell!")

    if summary_length(summary) > SUMMARY_MAX_LENGTH:
        click.echo(f"Nutshell trimmed to {SUMMARY_MAX_LENGTH} characters. {encouraging_message(rating)}")

    try:
        entry = MemoryEntry.create(rating, summary, details)
    except InvalidEntryError as e:
        raise click.UsageError(str(e)) from e

    store = store_from_context(ctx)
    store.add(entry)

    click.echo("Memory saved!")
    click.echo(motivational_message(rating))
