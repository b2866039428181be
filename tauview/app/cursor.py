"""Navigation cursor over a Gallery.

Two states: empty (no images, index is None) and positioned (0 <= index < len).
Every transition keeps that invariant; operations that make no sense on an
empty Gallery are no-ops.
"""

from __future__ import annotations

from collections.abc import Callable

from tauview.image_engine.scanner import Gallery
from tauview.logger import get_logger
from tauview.ops.file_operations import TrashResult

_logger = get_logger("cursor")


class Cursor:
    def __init__(self, gallery: Gallery | None = None, index: int | None = None) -> None:
        self._gallery = gallery if gallery is not None else Gallery()
        self._index: int | None = None
        self._grid_mode = False
        if len(self._gallery):
            self._index = self._clamp(0 if index is None else index)

    @property
    def gallery(self) -> Gallery:
        return self._gallery

    @property
    def index(self) -> int | None:
        return self._index

    @property
    def is_empty(self) -> bool:
        return self._index is None

    @property
    def current(self) -> str | None:
        if self._index is None:
            return None
        return self._gallery[self._index]

    @property
    def grid_mode(self) -> bool:
        return self._grid_mode

    def _clamp(self, index: int) -> int:
        return max(0, min(int(index), len(self._gallery) - 1))

    # ---- navigation ----
    def next(self) -> None:
        if self._index is None:
            return
        self._index = (self._index + 1) % len(self._gallery)

    def prev(self) -> None:
        if self._index is None:
            return
        n = len(self._gallery)
        self._index = (self._index - 1 + n) % n

    def first(self) -> None:
        if self._index is not None:
            self._index = 0

    def last(self) -> None:
        if self._index is not None:
            self._index = len(self._gallery) - 1

    def select(self, index: int) -> None:
        """Pick an entry (e.g. a grid cell) and return to single view."""
        if self._index is None:
            return
        self._index = self._clamp(index)
        self._grid_mode = False

    # ---- grid mode (index is kept) ----
    def show_grid(self) -> None:
        self._grid_mode = True

    def show_single(self) -> None:
        self._grid_mode = False

    def toggle_grid(self) -> None:
        self._grid_mode = not self._grid_mode

    # ---- removal ----
    def remove_current(self, trash: Callable[[str], TrashResult]) -> TrashResult | None:
        """Trash the current entry, then drop it from the Gallery.

        The file is moved first; on failure the Gallery and index stay as they
        were and the failed result is returned. Returns None when empty.
        """
        path = self.current
        if path is None:
            return None
        result = trash(path)
        if not result.ok:
            _logger.warning("remove_current: keeping %s: %s", path, result.error)
            return result
        self._drop(self._index)
        return result

    def forget(self, path: str) -> bool:
        """Drop `path` from the Gallery if present (file already gone from disk)."""
        index = self._gallery.index_of(path)
        if index is None:
            return False
        self._drop(index)
        return True

    def _drop(self, index: int) -> None:
        self._gallery = self._gallery.without(index)
        if not len(self._gallery):
            self._index = None
            return
        current = self._index if self._index is not None else 0
        if index < current:
            current -= 1
        self._index = self._clamp(current)
