"""Names and payload shapes for the QML <-> Python boundary.

QML -> Python request/response: backend.request(Command, payload) -> reply dict
QML -> Python notification:     backend.dispatch(Notice, payload)
Python -> QML notification:     backend.event(dict) with "name" from Event
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Command(str, Enum):
    CLASSIFY = "classify"
    SCAN = "scan"
    MOVE_TO_TRASH = "moveToTrash"


class Notice(str, Enum):
    OPEN = "open"
    NEXT = "next"
    PREV = "prev"
    GRID = "grid"
    SINGLE = "single"
    SELECT = "select"
    REMOVE = "remove"
    APP_READY = "appReady"
    LOG = "log"


class Event(str, Enum):
    OPEN = "open"
    GALLERY_CHANGED = "galleryChanged"
    CURSOR_CHANGED = "cursorChanged"
    REMOVE_FAILED = "removeFailed"
    ERROR = "error"


def reply_ok(value: Any = None, **extra: Any) -> dict[str, Any]:
    return {"ok": True, "value": value, **extra}


def reply_error(message: str) -> dict[str, Any]:
    return {"ok": False, "error": str(message)}


def event(name: Event, **fields: Any) -> dict[str, Any]:
    return {"type": "event", "name": name.value, **fields}
