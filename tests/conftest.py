"""Pytest configuration.

A single `QApplication` is created for the whole session as early as possible
(the engine and backend are QObjects with signals) and shut down at the end.

Also provides minimal image files: the engine only sniffs leading bytes, but
each sample is a complete, tiny file of its format.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

_APP: Any | None = None

PNG_1PX = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)
JPEG_MIN = bytes.fromhex(
    "ffd8ffe000104a46494600010100000100010000"
    "ffdb004300" + "01" * 64 + "ffc0000b080001000101011100"
    "ffc4001400010000000000000000000000000000000000"
    "ffda0008010100003f00d2cf20ffd9"
)
GIF_1PX = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00"
    b"!\xf9\x04\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)
WEBP_1PX = (
    b"RIFF\x1a\x00\x00\x00WEBPVP8L\x0d\x00\x00\x00"
    b"\x2f\x00\x00\x00\x10\x07\x10\x11\x11\x88\x88\xfe\x07\x00"
)
ICO_1PX = bytes.fromhex(
    "0000010001000101000001002000300000001600000028000000010000000200000001002000"
    "000000000000000000000000000000000000000000000000ff00000000"
)

SAMPLES = {
    "jpeg": JPEG_MIN,
    "png": PNG_1PX,
    "gif": GIF_1PX,
    "webp": WEBP_1PX,
    "ico": ICO_1PX,
}


def pytest_configure(config) -> None:  # noqa: ARG001
    """Ensure a QApplication exists before collecting/running tests."""

    # Import lazily so non-Qt environments can still import this conftest.
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError:
        return

    global _APP

    app = QApplication.instance()
    if app is None:
        # Keep a strong ref so it isn't GC'd mid-session.
        _APP = QApplication([])
    else:
        _APP = app


def pytest_sessionfinish(session, exitstatus) -> None:  # noqa: ARG001
    """Attempt a clean Qt shutdown to avoid lingering threads at interpreter exit."""

    try:
        from PySide6.QtWidgets import QApplication
    except ImportError:
        return

    app = QApplication.instance()
    if app is None:
        return

    app.quit()
    app.processEvents()


@pytest.fixture
def write_image():
    """write_image(path, kind="png") -> Path with a minimal image of that kind."""

    def _write(path: Path, kind: str = "png") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(SAMPLES[kind])
        return path

    return _write


@pytest.fixture
def image_dir(tmp_path: Path, write_image) -> Path:
    """Folder with three PNGs a.png, b.png, c.png."""
    folder = tmp_path / "images"
    for name in ("a.png", "b.png", "c.png"):
        write_image(folder / name)
    return folder
