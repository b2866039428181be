"""One-level directory scan producing an ordered, image-only Gallery.

Entries are tagged with an explicit EntryType while listing; only regular,
non-hidden files whose content sniffs as a supported image survive. The
result is sorted with pathlib ordering so the same folder always yields the
same sequence.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from tauview.logger import get_logger
from tauview.path_utils import abs_path, abs_path_str

from .mime_sniffer import ImageKind, classify

_logger = get_logger("scanner")

HIDDEN_PREFIX = "."


class EntryType(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class DirEntry:
    path: str
    name: str
    type: EntryType


@dataclass(frozen=True)
class Entry:
    path: str
    kind: ImageKind


@dataclass(frozen=True)
class Gallery:
    """Immutable snapshot of the images found in one folder."""

    folder: str = ""
    files: tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.files)

    def __getitem__(self, index: int) -> str:
        return self.files[index]

    def __iter__(self):
        return iter(self.files)

    def __contains__(self, path: object) -> bool:
        return path in self.files

    def index_of(self, path: str) -> int | None:
        target = str(path) if path in self.files else child_path(path)
        try:
            return self.files.index(target)
        except ValueError:
            return None

    def without(self, index: int) -> Gallery:
        """New Gallery with the entry at `index` removed."""
        files = self.files[:index] + self.files[index + 1 :]
        return Gallery(folder=self.folder, files=files)


def child_path(path: str | Path) -> str:
    """Absolute path of `path` with only its parent folder resolved.

    The final component is kept as listed so a symlinked image keeps its own
    name in the Gallery.
    """
    p = Path(path)
    return os.path.join(abs_path_str(p.parent), p.name)


def is_hidden(name: str | None) -> bool:
    # A nameless entry cannot be shown to the user, treat it as hidden.
    return not name or name.startswith(HIDDEN_PREFIX)


def _entry_type(de: os.DirEntry) -> EntryType:
    try:
        if de.is_dir():
            return EntryType.DIRECTORY
        if de.is_file():
            return EntryType.FILE
    except OSError:
        pass
    return EntryType.OTHER


def list_entries(directory: str | Path) -> list[DirEntry]:
    """List the immediate children of `directory` with their type tag.

    Raises OSError when the directory itself cannot be read.
    """
    entries: list[DirEntry] = []
    with os.scandir(abs_path_str(directory)) as it:
        for de in it:
            entries.append(DirEntry(path=de.path, name=de.name, type=_entry_type(de)))
    return entries


def scan_entries(directory: str | Path) -> list[Entry]:
    """Image entries of `directory`, sorted; empty list if the folder is unreadable."""
    try:
        raw = list_entries(directory)
    except OSError as e:
        _logger.warning("scan failed for %s: %s", directory, e)
        return []

    found: list[Entry] = []
    for de in raw:
        if de.type is EntryType.DIRECTORY:
            continue
        if is_hidden(de.name):
            continue
        kind = classify(de.path)
        if kind is None:
            continue
        found.append(Entry(path=de.path, kind=kind))

    found.sort(key=lambda e: Path(e.path))
    _logger.debug("scan %s: %d of %d entries are images", directory, len(found), len(raw))
    return found


def scan(directory: str | Path) -> Gallery:
    folder = abs_path_str(directory)
    files = tuple(e.path for e in scan_entries(folder))
    return Gallery(folder=folder, files=files)


def resolve_open_target(path: str | Path) -> tuple[str, str | None]:
    """Map an explicitly opened path to (folder to scan, path to select).

    A directory opens itself with no preferred selection; anything else opens
    its parent folder and asks for itself to be selected.
    """
    p = abs_path(path)
    try:
        if p.is_dir():
            return abs_path_str(p), None
    except OSError:
        pass
    selected = child_path(path)
    return os.path.dirname(selected), selected
