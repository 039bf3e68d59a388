"""Read-only virtual filesystem backed by ZIP entry names."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from .exceptions import VFSError

logger = logging.getLogger(__name__)

DEFAULT_ENTRIES: tuple[str, ...] = (
    "/folder1/file1.txt",
    "/folder1/file2.txt",
    "/folder2/file3.txt",
)


class VirtualFileSystem:
    """Flat, immutable set of absolute entry paths.

    Directories are implicit: a directory exists when some entry starts with
    its path. Iteration follows the order the entries were supplied in.
    """

    __slots__ = ("_entries", "_members")

    def __init__(self, entries: Iterable[str]) -> None:
        ordered = tuple(entries)
        if not ordered:
            raise VFSError("Virtual filesystem needs at least one entry")
        for entry in ordered:
            if not entry.startswith("/"):
                raise VFSError(f"VFS entry must be absolute: {entry!r}")
        self._entries = ordered
        self._members = frozenset(ordered)

    @classmethod
    def from_zip(cls, path: str | Path) -> "VirtualFileSystem":
        with zipfile.ZipFile(path) as archive:
            names = archive.namelist()
        return cls(f"/{name}" for name in names)

    @classmethod
    def default(cls) -> "VirtualFileSystem":
        return cls(DEFAULT_ENTRIES)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._members

    def __repr__(self) -> str:
        return f"VirtualFileSystem({list(self._entries)!r})"

    def has_prefix(self, candidate: str) -> bool:
        return any(entry.startswith(candidate) for entry in self._entries)

    def under(self, prefix: str) -> Iterator[str]:
        return (entry for entry in self._entries if entry.startswith(prefix))

    def first_containing(self, needle: str) -> str | None:
        for entry in self._entries:
            if needle in entry:
                return entry
        return None


def load_vfs(path: str | Path | None) -> VirtualFileSystem:
    """Load the archive at ``path``, falling back to the default seed."""
    if not path:
        logger.warning("No filesystem_path configured, initializing default VFS")
        return VirtualFileSystem.default()
    try:
        vfs = VirtualFileSystem.from_zip(path)
    except (OSError, zipfile.BadZipFile, NotImplementedError, ValueError, EOFError) as exc:
        logger.warning("ZIP archive %s not available (%s), initializing default VFS", path, exc)
        return VirtualFileSystem.default()
    except VFSError:
        logger.warning("ZIP archive %s has no entries, initializing default VFS", path)
        return VirtualFileSystem.default()
    logger.info("VFS initialized with %d entries from %s", len(vfs), path)
    logger.debug("VFS entries: %s", list(vfs))
    return vfs


__all__ = ["DEFAULT_ENTRIES", "VirtualFileSystem", "load_vfs"]
