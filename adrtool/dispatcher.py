"""Run a resolved command against a PathStore and a FileSystem.

Fatal failures raise ``AdrError`` subclasses. Directory creation and template
copy failures are only logged (see ``adrtool.fs_ops``), so init and new can
report success while part of their effect is missing. Nothing is rolled
back: if the marker file is written but the directory can't be created, the
marker keeps pointing at the missing directory.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import click

from adrtool.commands import Command, InitCommand, ListCommand, NewCommand
from adrtool.config import Config
from adrtool.errors import AlreadyInitializedError
from adrtool.fs_ops import (
    FileSystem,
    copy_init_template,
    count_records,
    create_directory_structure,
    create_record_from_template,
    list_records,
)
from adrtool.location import PathStore

log = logging.getLogger("adrtool.dispatcher")

Echo = Callable[[str], None]


def slugify_title(title: str) -> str:
    """Lowercase a title and replace each space with an underscore.

    Nothing else is touched: "Use Event Sourcing" -> "use_event_sourcing".
    """
    return title.lower().replace(" ", "_")


def record_filename(location: str, ordinal: int, title: str) -> Path:
    """Build the path of a record: <location>/<ordinal>_<slug>.md."""
    return Path(location) / f"{ordinal}_{slugify_title(title)}.md"


def init_adrs(
    path: str, store: PathStore, fs: FileSystem, config: Config, working_dir: Path
) -> str:
    """Start tracking ADRs in ``path``.

    Raises:
        AlreadyInitializedError: If a location is already recorded
        MarkerWriteError: If the location can't be recorded
    """
    if store.exists():
        raise AlreadyInitializedError(store.name)

    store.write(path)
    create_directory_structure(fs, path)
    copy_init_template(fs, config.get_init_template_path(working_dir), path)
    return path


def new_adr(
    title: str, store: PathStore, fs: FileSystem, config: Config, working_dir: Path
) -> Path:
    """Create the next numbered ADR from the record template.

    The ordinal is the number of existing records plus one.

    Returns:
        Path of the new record (returned even if the copy failed)

    Raises:
        MarkerMissingError: If no location is recorded
        DirectoryListError: If the location can't be listed
    """
    location = store.read()
    ordinal = count_records(fs, location) + 1
    record_path = record_filename(location, ordinal, title)
    log.debug("Next ADR ordinal in %s is %d", location, ordinal)

    create_record_from_template(fs, config.get_record_template_path(working_dir), record_path)
    return record_path


def list_adrs(store: PathStore, fs: FileSystem, echo: Echo) -> list[str]:
    """Echo each record filename at the recorded location, one per line.

    Raises:
        MarkerMissingError: If no location is recorded
        DirectoryListError: If the location can't be listed
    """
    location = store.read()
    records = list_records(fs, location)
    for name in records:
        echo(name)
    return records


def handle_command(
    command: Command,
    store: PathStore,
    fs: FileSystem,
    config: Config,
    working_dir: Optional[Path] = None,
    echo: Echo = click.echo,
) -> object:
    """Dispatch a command to its handler.

    Args:
        command: Resolved command
        store: Where the ADR location is recorded
        fs: Filesystem the ADRs live on
        config: Loaded configuration
        working_dir: Directory resources are resolved against (default: cwd)
        echo: Output function for listed records

    Returns:
        The handler's result: location for init, record path for new,
        record names for list
    """
    if working_dir is None:
        working_dir = Path.cwd()

    if isinstance(command, InitCommand):
        return init_adrs(command.path, store, fs, config, working_dir)
    if isinstance(command, NewCommand):
        return new_adr(command.title, store, fs, config, working_dir)
    if isinstance(command, ListCommand):
        return list_adrs(store, fs, echo)

    raise TypeError(f"Unknown command: {command!r}")
