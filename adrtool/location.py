"""Where the ADRs live.

The storage location is recorded once by ``adr init`` and read back by every
other command. ``MarkerFileStore`` keeps it in the marker file (``.adr_file``)
in the working directory; the marker's existence is what marks a directory
as initialized.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from adrtool.errors import MarkerMissingError, MarkerWriteError
from adrtool.fs_ops import FileSystem

log = logging.getLogger("adrtool.location")


class PathStore(ABC):
    """Persists the single configured ADR storage location."""

    name = "<store>"

    @abstractmethod
    def exists(self) -> bool:
        """Whether a location has been recorded."""
        pass

    @abstractmethod
    def read(self) -> str:
        """Get the recorded location.

        Raises:
            MarkerMissingError: If nothing is recorded or it can't be read
        """
        pass

    @abstractmethod
    def write(self, location: str) -> None:
        """Record the location.

        Raises:
            MarkerWriteError: If the location can't be persisted
        """
        pass


class MarkerFileStore(PathStore):
    """PathStore backed by the marker file.

    The file holds the location as UTF-8: no trailing newline, no quoting
    or escaping. Content that isn't valid UTF-8 counts as unreadable.
    """

    def __init__(self, fs: FileSystem, marker_path: Path):
        self.fs = fs
        self.marker_path = Path(marker_path)
        self.name = str(marker_path)

    def exists(self) -> bool:
        return self.fs.exists(self.marker_path)

    def read(self) -> str:
        try:
            data = self.fs.read_bytes(self.marker_path)
        except FileNotFoundError as e:
            raise MarkerMissingError(self.marker_path) from e
        except OSError as e:
            raise MarkerMissingError(self.marker_path, str(e)) from e

        try:
            location = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MarkerMissingError(self.marker_path, str(e)) from e

        log.debug("Read ADR location %r from %s", location, self.marker_path)
        return location

    def write(self, location: str) -> None:
        try:
            self.fs.write_bytes(self.marker_path, location.encode("utf-8"))
        except (OSError, UnicodeEncodeError) as e:
            raise MarkerWriteError(self.marker_path, str(e)) from e
        log.info("Tracking ADRs in %s", location)


class MemoryPathStore(PathStore):
    """PathStore held in memory, for tests."""

    name = "<memory>"

    def __init__(self, location: Optional[str] = None):
        self.location = location
        self.writes = 0

    def exists(self) -> bool:
        return self.location is not None

    def read(self) -> str:
        if self.location is None:
            raise MarkerMissingError(self.name)
        return self.location

    def write(self, location: str) -> None:
        self.location = location
        self.writes += 1
