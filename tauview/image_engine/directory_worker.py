"""Background worker that scans one folder into a Gallery.

Runs on the engine's QThread so listing and sniffing a large folder never
blocks the GUI thread. Every result is tagged with the request id it answers
so the engine can drop stale ones.
"""

from PySide6.QtCore import QObject, Signal, Slot

from tauview.logger import get_logger

from .scanner import scan

_logger = get_logger("directory_worker")


class DirectoryWorker(QObject):
    # Emits: request_id, Gallery
    gallery_ready = Signal(int, object)

    @Slot(int, str)
    def run(self, request_id: int, folder_path: str) -> None:
        gallery = scan(folder_path)
        _logger.debug("request %d: %s -> %d images", request_id, gallery.folder, len(gallery))
        self.gallery_ready.emit(request_id, gallery)
