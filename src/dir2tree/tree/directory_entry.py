"""A directory child captured while listing its parent."""

import os
import stat
from dataclasses import dataclass
from pathlib import Path


def display_name(name: str) -> str:
    """Return ``name`` with bytes that are not valid UTF-8 replaced by U+FFFD.

    Example:
        >>> display_name("bad\\udcff.txt") == "bad\\ufffd.txt"
        True
        >>> display_name("café.txt")
        'café.txt'
    """
    return os.fsencode(name).decode("utf-8", "replace")


@dataclass(frozen=True)
class DirectoryEntry:
    """Snapshot of one child of a directory.

    Symbolic links are described by the link itself, never by its target, so a link to
    a directory is listed as a file and is not descended into.

    Attributes:
        name (str): The bare name of the entry, safe to print. Bytes of the on-disk
            name that are not valid UTF-8 appear as U+FFFD.
        path (Path): The absolute path of the entry.
        is_directory (bool): True for directories.
        size (int): Size in bytes. Only meaningful when is_directory is False.
    """

    name: str
    path: Path
    is_directory: bool
    size: int = 0

    @classmethod
    def from_dir_entry(cls, dir_entry: "os.DirEntry[str]") -> "DirectoryEntry":
        """Build an entry from an ``os.scandir`` result.

        Raises:
            OSError: If the entry's metadata cannot be read.
        """
        info = dir_entry.stat(follow_symlinks=False)
        is_directory = stat.S_ISDIR(info.st_mode)
        return cls(
            name=display_name(dir_entry.name),
            path=Path(dir_entry.path),
            is_directory=is_directory,
            size=0 if is_directory else info.st_size,
        )
