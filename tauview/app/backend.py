from __future__ import annotations

import contextlib
from collections.abc import Callable
from typing import Any

from PySide6.QtCore import Property, QObject, QUrl, Signal, Slot

from tauview.app.cursor import Cursor
from tauview.app.messages import Command, Event, Notice, event, reply_error, reply_ok
from tauview.app.session import Session
from tauview.app.state.gallery_state import GalleryState
from tauview.image_engine.engine import ImageEngine
from tauview.image_engine.mime_sniffer import classify
from tauview.image_engine.scanner import Gallery, resolve_open_target, scan
from tauview.logger import get_logger
from tauview.ops.file_operations import TrashResult, move_to_trash
from tauview.settings_manager import SettingsManager

_logger = get_logger("backend")


class BackendFacade(QObject):
    """Single backend object exposed to QML.

    QML → Python: backend.request(cmd, payload) -> reply, backend.dispatch(name, payload)
    Python → QML: backend.event(dict)
    QML bindings: backend.gallery
    """

    # QObject already has an .event() handler method, so we must not shadow it.
    # Expose the QML signal name as "event" while keeping a safe Python attribute.
    event_ = Signal(object, name="event")

    def __init__(
        self,
        engine: ImageEngine | None = None,
        settings: SettingsManager | None = None,
        trash: Callable[[str], TrashResult] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)

        self._engine = engine or ImageEngine(self)
        self._settings_mgr = settings or SettingsManager()
        self._trash = trash or move_to_trash

        self._gallery = GalleryState(self)
        self._session = Session()

        # Only the latest open request may replace the session.
        self._pending_request: int | None = None
        self._pending_select: str | None = None
        # Paths trashed while a scan is in flight; the worker may have listed them already.
        self._trashed_in_flight: set[str] = set()

        # Startup handshake: a CLI path waits for the shell's appReady.
        self._ready = False
        self._startup_path: str | None = None

        self._gallery._set_last_open_dir(self._settings_mgr.last_open_dir or "")
        self._engine.gallery_ready.connect(self._on_engine_gallery_ready)

    # ---- expose state objects to QML ----
    def _get_gallery(self) -> QObject:
        return self._gallery

    gallery = Property(QObject, _get_gallery, constant=True)  # type: ignore[arg-type]

    @property
    def session(self) -> Session:
        return self._session

    @property
    def cursor(self) -> Cursor:
        return self._session.cursor

    def set_startup_path(self, path: str | None) -> None:
        """Remember the CLI path; it is opened once the shell reports appReady."""
        if not path:
            return
        if self._ready:
            self._open(path)
            return
        self._startup_path = str(path)

    @Slot()
    def shutdown(self) -> None:
        shutdown = getattr(self._engine, "shutdown", None)
        if callable(shutdown):
            shutdown()

    # ---- QML request/response entry ----
    @Slot(str, "QVariant", result="QVariant")  # type: ignore[call-overload]
    def request(self, cmd: str, payload: object | None = None) -> dict[str, Any]:
        command = str(cmd or "").strip()
        if command not in {c.value for c in Command}:
            return reply_error(f"Unknown cmd: {command}")

        path = _payload_path(payload)
        if not path:
            return reply_error(f"{command}: missing path")

        if command == Command.CLASSIFY:
            kind = classify(path)
            return reply_ok(kind is not None, kind=kind.mime if kind else None)

        if command == Command.SCAN:
            gallery = scan(path)
            return reply_ok(list(gallery.files), folder=gallery.folder)

        return self._cmd_move_to_trash(path)

    # ---- QML notification entry ----
    # NOTE: The second argument must be a Qt-friendly variant type.
    # Using `object` here causes runtime failures when QML passes a JS object
    # (e.g. `{ index: 3 }`).
    @Slot(str, "QVariant")  # type: ignore[call-overload]
    def dispatch(self, name: str, payload: object | None = None) -> None:  # noqa: PLR0911
        notice = str(name or "").strip()
        if not notice:
            self.event_.emit(event(Event.ERROR, level="error", message="Empty notice"))
            return

        if notice == Notice.OPEN:
            path = _payload_path(payload)
            # A cancelled file dialog sends open without a path.
            if path:
                self._open(path)
            return

        if notice == Notice.NEXT:
            self._navigate(Cursor.next)
            return

        if notice == Notice.PREV:
            self._navigate(Cursor.prev)
            return

        if notice == Notice.GRID:
            self._navigate(Cursor.show_grid)
            return

        if notice == Notice.SINGLE:
            self._navigate(Cursor.show_single)
            return

        if notice == Notice.SELECT:
            try:
                idx = int(_get_payload_value(payload, "index", default=None))
            except (TypeError, ValueError):
                self.event_.emit(event(Event.ERROR, level="warning", message="select: invalid index"))
                return
            self._navigate(lambda c: c.select(idx))
            return

        if notice == Notice.REMOVE:
            self._remove_current()
            return

        if notice == Notice.APP_READY:
            self._on_app_ready()
            return

        if notice == Notice.LOG:
            self._handle_log_cmd(payload)
            return

        self.event_.emit(event(Event.ERROR, level="warning", message=f"Unknown notice: {notice}"))

    # ---- handlers ----
    def _handle_log_cmd(self, payload: object | None) -> None:
        level = str(_get_payload_value(payload, "level", default="debug")).lower()
        msg = str(_get_payload_value(payload, "message", default=""))
        if not msg:
            return

        # integrate into Python logging pipeline
        if level == "info":
            _logger.info("[QML] %s", msg)
        elif level in {"warn", "warning"}:
            _logger.warning("[QML] %s", msg)
        elif level == "error":
            _logger.error("[QML] %s", msg)
        else:
            _logger.debug("[QML] %s", msg)

    def _on_app_ready(self) -> None:
        self._ready = True
        path, self._startup_path = self._startup_path, None
        if path:
            self._open(path)

    def _open(self, path: str) -> None:
        folder, selected = resolve_open_target(path)
        self._pending_select = selected
        self._pending_request = self._engine.open_folder(folder)
        self._trashed_in_flight.clear()

        self._settings_mgr.set("last_open_dir", folder)
        self._gallery._set_last_open_dir(folder)

        self.event_.emit(event(Event.OPEN, path=selected or folder))

    def _navigate(self, op: Callable[[Cursor], None]) -> None:
        cursor = self._session.cursor
        before = (cursor.index, cursor.grid_mode)
        op(cursor)
        if (cursor.index, cursor.grid_mode) == before:
            return
        self._publish(Event.CURSOR_CHANGED)

    def _remove_current(self) -> None:
        result = self._session.cursor.remove_current(self._trash)
        if result is None:
            return
        if not result.ok:
            self.event_.emit(event(Event.REMOVE_FAILED, path=result.path, message=result.error))
            return
        self._note_trashed(result.path)
        self._publish(Event.GALLERY_CHANGED)

    def _cmd_move_to_trash(self, path: str) -> dict[str, Any]:
        result = self._trash(path)
        if not result.ok:
            return reply_error(result.error or "move to trash failed")
        self._note_trashed(path)
        # Keep the open gallery in step with the disk.
        if self._session.cursor.forget(path):
            self._publish(Event.GALLERY_CHANGED)
        return reply_ok()

    def _note_trashed(self, path: str) -> None:
        if self._pending_request is not None:
            self._trashed_in_flight.add(path)

    def _publish(self, name: Event) -> None:
        cursor = self._session.cursor
        self._gallery._apply(cursor)
        self.event_.emit(
            event(
                name,
                folder=cursor.gallery.folder,
                count=len(cursor.gallery),
                index=-1 if cursor.index is None else cursor.index,
                path=cursor.current or "",
                gridMode=cursor.grid_mode,
            )
        )

    # ---- engine slots ----
    @Slot(int, object)
    def _on_engine_gallery_ready(self, request_id: int, gallery: Gallery) -> None:
        if request_id != self._pending_request:
            _logger.debug("ignoring gallery for request %d (waiting for %s)", request_id, self._pending_request)
            return
        selected = self._pending_select
        self._pending_request = None
        self._pending_select = None
        for path in self._trashed_in_flight:
            index = gallery.index_of(path)
            if index is not None:
                gallery = gallery.without(index)
        self._trashed_in_flight.clear()

        # Whole-session swap: gallery and cursor are replaced together.
        self._session = Session.from_gallery(gallery, selected)
        self._publish(Event.GALLERY_CHANGED)


def _to_python(payload: object | None) -> object | None:
    # QML often passes a JS object which arrives as QJSValue/QVariant.
    # Convert to a Python value when possible.
    if payload is not None and payload.__class__.__name__ == "QJSValue" and hasattr(payload, "toVariant"):
        with contextlib.suppress(Exception):
            payload = payload.toVariant()  # type: ignore[attr-defined]
    return payload


def _payload_path(payload: object | None) -> str:
    """Local filesystem path from a QML payload ({path}, plain string, or file: URL)."""
    payload = _to_python(payload)
    raw = _get_payload_value(payload, "path", default=None)
    if raw is None and isinstance(payload, str):
        raw = payload
    p = str(raw or "").strip()
    if p.startswith("file:"):
        url = QUrl(p)
        if url.isLocalFile():
            p = url.toLocalFile()
    return p


def _get_payload_value(payload: object | None, key: str, *, default: Any) -> Any:
    """Extract a value from a QML payload.

    Supports:
    - dict-like payloads (Python dict)
    - None
    - otherwise returns default
    """

    payload = _to_python(payload)
    if isinstance(payload, dict):
        return payload.get(key, default)

    return default
