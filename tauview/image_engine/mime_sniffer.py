"""Content-based image type detection.

Only the first bytes of a file are inspected; names and extensions are never
consulted. The set of recognised kinds is closed: anything that does not carry
one of the signatures below is "not an image".
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from tauview.logger import get_logger

_logger = get_logger("mime_sniffer")

# Longest signature is RIFF....WEBP (12 bytes).
SNIFF_BYTES = 16

_PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
_JPEG_MAGIC = b"\xff\xd8\xff"
_GIF_MAGICS = (b"GIF87a", b"GIF89a")
_ICO_MAGIC = b"\x00\x00\x01\x00"
_RIFF_MAGIC = b"RIFF"
_WEBP_FOURCC = b"WEBP"
_WEBP_FOURCC_OFFSET = 8


class ImageKind(Enum):
    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    WEBP = "image/webp"
    ICO = "image/vnd.microsoft.icon"

    @property
    def mime(self) -> str:
        return self.value


SUPPORTED_KINDS: tuple[ImageKind, ...] = tuple(ImageKind)

# Filter offered by the shell's open dialog.
DIALOG_EXTENSIONS: tuple[str, ...] = ("ico", "gif", "png", "jpg", "jpeg", "webp")


def sniff(data: bytes) -> ImageKind | None:
    """Classify an in-memory file prefix."""
    if data.startswith(_PNG_MAGIC):
        return ImageKind.PNG
    if data.startswith(_JPEG_MAGIC):
        return ImageKind.JPEG
    if data.startswith(_GIF_MAGICS):
        return ImageKind.GIF
    if (
        data.startswith(_RIFF_MAGIC)
        and data[_WEBP_FOURCC_OFFSET : _WEBP_FOURCC_OFFSET + len(_WEBP_FOURCC)] == _WEBP_FOURCC
    ):
        return ImageKind.WEBP
    if data.startswith(_ICO_MAGIC):
        return ImageKind.ICO
    return None


def classify(path: str | Path) -> ImageKind | None:
    """Return the image kind of `path`, or None when it is not a supported image.

    Read failures (permissions, vanished file, I/O errors) are logged and
    reported as "not an image" so one bad file never aborts a folder scan.
    """
    try:
        with open(path, "rb") as f:
            head = f.read(SNIFF_BYTES)
    except OSError as e:
        _logger.warning("classify: unreadable %s: %s", path, e)
        return None
    return sniff(head)


def is_image(path: str | Path) -> bool:
    return classify(path) is not None
