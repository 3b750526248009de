"""memories CLI — entry point for add, list, delete and export commands."""

from __future__ import annotations

import click

from memories import __version__


@click.group()
@click.version_option(version=__version__, package_name="memories")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Where memories are kept. Defaults to ~/.memories-data.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML or JSON config file. Defaults to ~/.memories/config.yaml.",
)
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR.")
@click.pass_context
def main(ctx: click.Context, data_dir: str | None, config_file: str | None, log_level: str | None) -> None:
    """Memories — capture, reflect, cherish."""
    from memories.core.cli.common import load_config
    from memories.core.exceptions import ConfigurationError
    from memories.core.utils.logging import setup_logging

    try:
        config = load_config(config_file=config_file, data_dir=data_dir)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(
        level=log_level or str(config.get("logging.level", "WARNING")),
        log_file=config.get("logging.file"),
    )
    ctx.obj = {"config": config}


# Register subcommands (their heavier imports are deferred into each command body)
from .add_cmd import add
from .delete_cmd import delete
from .export_cmd import export
from .list_cmd import list_memories

main.add_command(add)
main.add_command(list_memories)
main.add_command(delete)
main.add_command(export)
