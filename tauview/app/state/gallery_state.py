from __future__ import annotations

from PySide6.QtCore import Property, QObject, Signal

from tauview.app.cursor import Cursor


class GalleryState(QObject):
    """State bound by the gallery UI (single view and grid)."""

    currentFolderChanged = Signal(str)
    imageFilesChanged = Signal()
    currentIndexChanged = Signal(int)
    currentPathChanged = Signal(str)
    gridModeChanged = Signal(bool)
    lastOpenDirChanged = Signal(str)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._current_folder = ""
        self._image_files: list[str] = []
        self._current_index = -1
        self._current_path = ""
        self._grid_mode = False
        self._last_open_dir = ""

    # ---- read-only properties (mutate via backend) ----
    def _get_current_folder(self) -> str:
        return str(self._current_folder)

    currentFolder = Property(str, _get_current_folder, notify=currentFolderChanged)  # type: ignore[arg-type]

    def _get_image_files(self) -> list[str]:
        return list(self._image_files)

    imageFiles = Property(list, _get_image_files, notify=imageFilesChanged)  # type: ignore[arg-type]

    def _get_current_index(self) -> int:
        return int(self._current_index)

    currentIndex = Property(int, _get_current_index, notify=currentIndexChanged)  # type: ignore[arg-type]

    def _get_current_path(self) -> str:
        return str(self._current_path)

    currentPath = Property(str, _get_current_path, notify=currentPathChanged)  # type: ignore[arg-type]

    def _get_grid_mode(self) -> bool:
        return bool(self._grid_mode)

    gridMode = Property(bool, _get_grid_mode, notify=gridModeChanged)  # type: ignore[arg-type]

    def _get_empty(self) -> bool:
        return not self._image_files

    empty = Property(bool, _get_empty, notify=imageFilesChanged)  # type: ignore[arg-type]

    def _get_last_open_dir(self) -> str:
        return str(self._last_open_dir)

    lastOpenDir = Property(str, _get_last_open_dir, notify=lastOpenDirChanged)  # type: ignore[arg-type]

    # ---- internal mutation helpers (called by backend) ----
    def _apply(self, cursor: Cursor) -> None:
        """Take over folder, files, index and mode from `cursor` in one step.

        All fields are assigned before any change signal fires, so a binding
        never sees the new file list paired with the old index.
        """
        gallery = cursor.gallery
        folder = str(gallery.folder)
        files = list(gallery.files)
        index = -1 if cursor.index is None else int(cursor.index)
        path = cursor.current or ""
        grid = bool(cursor.grid_mode)

        folder_changed = folder != self._current_folder
        files_changed = files != self._image_files
        index_changed = index != self._current_index
        path_changed = path != self._current_path
        grid_changed = grid != self._grid_mode

        self._current_folder = folder
        self._image_files = files
        self._current_index = index
        self._current_path = path
        self._grid_mode = grid

        if folder_changed:
            self.currentFolderChanged.emit(folder)
        if files_changed:
            self.imageFilesChanged.emit()
        if index_changed:
            self.currentIndexChanged.emit(index)
        if path_changed:
            self.currentPathChanged.emit(path)
        if grid_changed:
            self.gridModeChanged.emit(grid)

    def _set_last_open_dir(self, folder: str) -> None:
        f = str(folder)
        if f == self._last_open_dir:
            return
        self._last_open_dir = f
        self.lastOpenDirChanged.emit(f)
