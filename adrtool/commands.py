"""Command resolution for adrtool.

Turns the raw argument list into one of three commands:

    adr init docs/architecture/
    adr new "some title"
    adr list

Any two-argument invocation whose first argument isn't ``new`` resolves to
init, so ``adr nit docs/adr`` initializes docs/adr.
"""

from dataclasses import dataclass
from typing import Sequence, Union

from adrtool.errors import InvalidCommandError


@dataclass(frozen=True)
class InitCommand:
    """Start tracking ADRs in ``path``."""

    path: str


@dataclass(frozen=True)
class NewCommand:
    """Create the next numbered ADR named after ``title``."""

    title: str


@dataclass(frozen=True)
class ListCommand:
    """Print the tracked ADR filenames."""


Command = Union[InitCommand, NewCommand, ListCommand]


def resolve_command(argv: Sequence[str]) -> Command:
    """Resolve a command from the process argument list.

    Args:
        argv: Full argument list; argv[0] is the program name and is ignored

    Returns:
        The resolved command

    Raises:
        InvalidCommandError: If no command can be resolved
    """
    if len(argv) < 2:
        raise InvalidCommandError()

    command = argv[1]

    if len(argv) == 2:
        if command != "list":
            raise InvalidCommandError()
        return ListCommand()

    arg = argv[2]
    if command == "new":
        return NewCommand(title=arg)
    return InitCommand(path=arg)
