"""Filesystem operations for ADR directories.

The ``FileSystem`` classes are thin capabilities over the OS calls the tool
needs. The module-level functions are the ADR operations built on top of
them:

- Creating the storage directory and copying the init template
- Counting and listing records (everything except init.md)
- Creating a new record from the record template

Directory creation and copy failures are logged and swallowed. Listing
failures raise ``DirectoryListError`` since nothing useful can follow.
"""

import logging
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

from adrtool.errors import DirectoryListError

log = logging.getLogger("adrtool.fs_ops")

INIT_FILE_NAME = "init.md"


class FileSystem(ABC):
    """The filesystem calls adrtool makes. All failures raise OSError."""

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create a directory and any missing parents."""
        pass

    @abstractmethod
    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file's content to dst, replacing dst if it exists."""
        pass

    @abstractmethod
    def list_files(self, path: Path) -> list[str]:
        """List names of regular files directly inside path.

        Names come back in enumeration order, which is not sorted.
        """
        pass

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        pass

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        pass

    @abstractmethod
    def exists(self, path: Path) -> bool:
        pass


class LocalFileSystem(FileSystem):
    """FileSystem backed by the real OS filesystem."""

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, src: Path, dst: Path) -> None:
        shutil.copyfile(src, dst)

    def list_files(self, path: Path) -> list[str]:
        with os.scandir(path) as entries:
            return [entry.name for entry in entries if entry.is_file()]

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        Path(path).write_bytes(data)

    def exists(self, path: Path) -> bool:
        return Path(path).exists()


class MemoryFileSystem(FileSystem):
    """In-memory FileSystem for exercising ADR operations without disk I/O.

    Files and directories keep insertion order, so listing is deterministic.
    Operation names in ``fail_on`` (e.g. ``{"copy_file"}``) raise OSError,
    which is how tests simulate permission or disk errors.
    """

    def __init__(
        self,
        files: Optional[dict[str, bytes]] = None,
        dirs: Iterable[str] = (),
        fail_on: Iterable[str] = (),
    ):
        self.files: dict[Path, bytes] = {}
        self.dirs: dict[Path, None] = {}
        self.fail_on = set(fail_on)
        self.calls: list[tuple[str, str]] = []

        for d in dirs:
            self._add_dir(Path(d))
        for name, data in (files or {}).items():
            path = Path(name)
            self._add_dir(path.parent)
            self.files[path] = data

    def _add_dir(self, path: Path) -> None:
        for parent in reversed(path.parents):
            if not self._is_root(parent):
                self.dirs.setdefault(parent, None)
        if not self._is_root(path):
            self.dirs.setdefault(path, None)

    @staticmethod
    def _is_root(path: Path) -> bool:
        return path == Path(".") or path == Path(path.anchor)

    def _is_dir(self, path: Path) -> bool:
        return self._is_root(path) or path in self.dirs

    def _record(self, op: str, path: Path) -> None:
        self.calls.append((op, str(path)))
        if op in self.fail_on:
            raise PermissionError(f"Simulated {op} failure: {path}")

    def make_dirs(self, path: Path) -> None:
        path = Path(path)
        self._record("make_dirs", path)
        if path in self.files:
            raise FileExistsError(f"File exists: {path}")
        self._add_dir(path)

    def copy_file(self, src: Path, dst: Path) -> None:
        src, dst = Path(src), Path(dst)
        self._record("copy_file", dst)
        if src not in self.files:
            raise FileNotFoundError(f"No such file: {src}")
        if not self._is_dir(dst.parent):
            raise FileNotFoundError(f"No such directory: {dst.parent}")
        if dst in self.dirs:
            raise IsADirectoryError(f"Is a directory: {dst}")
        self.files[dst] = self.files[src]

    def list_files(self, path: Path) -> list[str]:
        path = Path(path)
        self._record("list_files", path)
        if path in self.files:
            raise NotADirectoryError(f"Not a directory: {path}")
        if not self._is_dir(path):
            raise FileNotFoundError(f"No such directory: {path}")
        return [f.name for f in self.files if f.parent == path]

    def read_bytes(self, path: Path) -> bytes:
        path = Path(path)
        self._record("read_bytes", path)
        if path not in self.files:
            raise FileNotFoundError(f"No such file: {path}")
        return self.files[path]

    def write_bytes(self, path: Path, data: bytes) -> None:
        path = Path(path)
        self._record("write_bytes", path)
        if not self._is_dir(path.parent):
            raise FileNotFoundError(f"No such directory: {path.parent}")
        self.files[path] = data

    def exists(self, path: Path) -> bool:
        path = Path(path)
        return path in self.files or self._is_dir(path)


def create_directory_structure(fs: FileSystem, location: str) -> bool:
    """Create the ADR storage directory, including parents.

    Args:
        fs: Filesystem to operate on
        location: Storage location as written to the marker file

    Returns:
        True if the directory exists afterwards, False if creation failed
    """
    try:
        fs.make_dirs(Path(location))
    except OSError as e:
        log.error("Could not create ADR directory %s: %s", location, e)
        return False
    log.debug("Created ADR directory %s", location)
    return True


def copy_init_template(fs: FileSystem, template: Path, location: str) -> bool:
    """Copy the init template to <location>/init.md.

    Returns:
        True if copied, False if the copy failed (the error is logged)
    """
    target = Path(location) / INIT_FILE_NAME
    try:
        fs.copy_file(template, target)
    except OSError as e:
        log.error("Could not copy %s to %s: %s", template, target, e)
        return False
    log.debug("Copied %s to %s", template, target)
    return True


def list_records(fs: FileSystem, location: str) -> list[str]:
    """List ADR record filenames at a location.

    Non-recursive. Only regular files count, and init.md is excluded.
    Order is whatever the filesystem enumeration yields.

    Raises:
        DirectoryListError: If the location is empty or can't be listed
    """
    if not location:
        raise DirectoryListError(location, "empty path")
    try:
        names = fs.list_files(Path(location))
    except OSError as e:
        raise DirectoryListError(location, str(e)) from e
    return [name for name in names if name != INIT_FILE_NAME]


def count_records(fs: FileSystem, location: str) -> int:
    """Count ADR records at a location (see list_records)."""
    return len(list_records(fs, location))


def create_record_from_template(fs: FileSystem, template: Path, record_path: Path) -> bool:
    """Copy the record template to a new record file.

    Returns:
        True if copied, False if the copy failed (the error is logged)
    """
    try:
        fs.copy_file(template, record_path)
    except OSError as e:
        log.error("Could not create ADR %s from %s: %s", record_path, template, e)
        return False
    log.info("Created ADR %s", record_path)
    return True
