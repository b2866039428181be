"""Trash operations.

Low-level *headless* helpers: confirmation dialogs live in the QML shell, and
the in-memory Gallery is updated by the caller, never here.
"""

import os
from dataclasses import dataclass

from send2trash import send2trash

from tauview.logger import get_logger

_logger = get_logger("file_operations")


@dataclass(frozen=True)
class TrashResult:
    """Outcome of one trash move. `error` is None on success."""

    path: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def send_to_recycle_bin(path: str) -> None:
    """Send a single file to the recycle bin.

    Uses send2trash for cross-platform support.

    Raises:
        Exception: If operation fails
    """
    _logger.debug("sending to recycle bin: %s", path)
    abs_p: str | None = None
    try:
        # abspath keeps a symlink itself as the target, not what it points to.
        abs_p = os.path.abspath(os.path.expanduser(path))
        send2trash(abs_p)
        _logger.debug("recycle bin success: %s", abs_p)
    except Exception as e:
        _logger.error("recycle bin failed: %s -> %s", abs_p or path, e)
        raise


def move_to_trash(path: str) -> TrashResult:
    """Move `path` to the platform trash and report the outcome.

    A failure is returned, not raised, and is never retried.
    """
    try:
        send_to_recycle_bin(path)
    except Exception as e:
        reason = str(e) or e.__class__.__name__
        return TrashResult(path=str(path), error=reason)
    return TrashResult(path=str(path))
