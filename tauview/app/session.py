from __future__ import annotations

from tauview.image_engine.scanner import Gallery, resolve_open_target, scan
from tauview.logger import get_logger

from .cursor import Cursor

_logger = get_logger("session")


class Session:
    """One Gallery/Cursor pair for one window.

    Opening a file or folder builds a new Session; the old one is dropped as a
    whole rather than being mutated into the new folder.
    """

    def __init__(self, cursor: Cursor | None = None) -> None:
        self.cursor = cursor if cursor is not None else Cursor()

    @classmethod
    def from_gallery(cls, gallery: Gallery, selected: str | None = None) -> Session:
        """Position on `selected`; fall back to the first image (or empty)."""
        index = gallery.index_of(selected) if selected else None
        if selected and index is None:
            _logger.debug("open target not among images, falling back: %s", selected)
        return cls(Cursor(gallery, index))

    @classmethod
    def open_explicit(cls, path: str) -> Session:
        """Synchronously scan the folder of `path` and position on it."""
        folder, selected = resolve_open_target(path)
        return cls.from_gallery(scan(folder), selected)

    @property
    def gallery(self) -> Gallery:
        return self.cursor.gallery
