"""CLI for adrtool.

    adr init docs/architecture/
    adr new "some title"
    adr list
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from adrtool import __version__
from adrtool.commands import InitCommand, NewCommand, resolve_command
from adrtool.config import load_config
from adrtool.dispatcher import handle_command
from adrtool.errors import AdrError
from adrtool.fs_ops import LocalFileSystem
from adrtool.location import MarkerFileStore

# Confirmations go to stdout, errors to stderr
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

log = logging.getLogger("adrtool.cli")


def configure_logging(verbose: bool) -> None:
    """Send adrtool logs to stderr. WARNING and up unless verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("adrtool").setLevel(level)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    }
)
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log every filesystem step")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Explicit .adr.yaml (default: search upwards from cwd)",
)
@click.argument("args", nargs=-1)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Optional[Path], args: tuple[str, ...]) -> None:
    """Manage Architecture Decision Records.

    \b
    Examples:
        adr init docs/architecture
        adr new "Use event sourcing"
        adr list
    """
    configure_logging(verbose)

    working_dir = Path.cwd()
    fs = LocalFileSystem()

    # Options are only read before the first word; everything after it
    # reaches resolve_command untouched, so "adr new -v" is a title.
    try:
        config = load_config(working_dir, config_file=config_path)
        store = MarkerFileStore(fs, config.get_marker_path(working_dir))
        command = resolve_command([ctx.info_name or "adr", *args])
        log.debug("Resolved %r", command)
        result = handle_command(command, store, fs, config, working_dir)
    except AdrError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if isinstance(command, InitCommand):
        console.print(f"[green]✓ Tracking ADRs in {escape(str(result))}[/green]")
    elif isinstance(command, NewCommand):
        console.print(f"[green]✓ Created {escape(str(result))}[/green]")


__all__ = ["main"]
