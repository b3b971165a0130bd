"""Exceptions raised by adrtool.

Everything here is fatal: the CLI reports it and exits non-zero.
Directory creation and template copy failures are not represented here,
they are logged by ``adrtool.fs_ops`` and execution continues.
"""

from pathlib import Path


class AdrError(Exception):
    """Base class for fatal adrtool errors."""


class InvalidCommandError(AdrError):
    """Raised when the command line doesn't resolve to a command."""

    def __init__(self) -> None:
        super().__init__("The first argument must be a command like [list|new|init]")


class AlreadyInitializedError(AdrError):
    """Raised by init when the marker file already exists."""

    def __init__(self, marker_path: Path | str):
        self.marker_path = marker_path
        super().__init__(f"adr_file found! You're already tracking ADRs! ({marker_path})")


class MarkerMissingError(AdrError):
    """Raised when the marker file is missing or can't be read."""

    def __init__(self, marker_path: Path | str, reason: str = "not found"):
        self.marker_path = marker_path
        self.reason = reason
        super().__init__(
            f"Unable to read {marker_path}: {reason}. Run 'adr init <path>' first."
        )


class MarkerWriteError(AdrError):
    """Raised when init can't write the marker file."""

    def __init__(self, marker_path: Path | str, reason: str):
        self.marker_path = marker_path
        self.reason = reason
        super().__init__(f"Unable to create {marker_path}: {reason}")


class DirectoryListError(AdrError):
    """Raised when the ADR storage location can't be listed."""

    def __init__(self, location: Path | str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Unable to list ADR directory {location}: {reason}")


class ConfigError(AdrError):
    """Raised when .adr.yaml can't be parsed or holds invalid values."""

    def __init__(self, config_file: Path | str, reason: str):
        self.config_file = config_file
        self.reason = reason
        super().__init__(f"Invalid config {config_file}: {reason}")
