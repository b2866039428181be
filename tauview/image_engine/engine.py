"""Image Engine - asynchronous folder scanning.

ImageEngine is the single entry point the backend uses to turn a folder into
a Gallery off the GUI thread. Requests are numbered; only the result of the
most recent request is published, earlier ones are discarded when they
arrive (last-request-wins).
"""

from PySide6.QtCore import QObject, QThread, Signal, Slot

from tauview.logger import get_logger
from tauview.path_utils import abs_path_str

from .directory_worker import DirectoryWorker
from .scanner import Gallery

_logger = get_logger("engine")


class ImageEngine(QObject):
    """Folder scanning engine.

    Signals:
        gallery_ready: Emitted with (request_id, Gallery) for the latest request only
    """

    gallery_ready = Signal(int, object)

    # Internal: hands a request to the worker thread (queued connection).
    _scan_requested = Signal(int, str)

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)

        self._request_id = 0

        self._dir_thread = QThread(self)
        self._dir_worker = DirectoryWorker()
        self._dir_worker.moveToThread(self._dir_thread)
        self._dir_worker.gallery_ready.connect(self._on_gallery_ready)
        self._dir_thread.finished.connect(self._dir_worker.deleteLater)
        # Connect directly to the worker slot so it executes in the worker's
        # thread instead of the GUI thread.
        self._scan_requested.connect(self._dir_worker.run)
        self._dir_thread.start()

        _logger.debug("ImageEngine initialized")

    def open_folder(self, path: str) -> int:
        """Queue a scan of `path` and return its request id.

        Any result still in flight for an older request will be dropped.
        """
        folder = abs_path_str(path)
        self._request_id += 1
        request_id = self._request_id
        _logger.debug("open_folder: request %d for %s", request_id, folder)
        self._scan_requested.emit(request_id, folder)
        return request_id

    def shutdown(self) -> None:
        if self._dir_thread.isRunning():
            self._dir_thread.quit()
            self._dir_thread.wait()
        _logger.debug("ImageEngine shut down")

    @Slot(int, object)
    def _on_gallery_ready(self, request_id: int, gallery: Gallery) -> None:
        if request_id != self._request_id:
            _logger.debug("dropping stale scan %d (latest %d): %s", request_id, self._request_id, gallery.folder)
            return
        self.gallery_ready.emit(request_id, gallery)
