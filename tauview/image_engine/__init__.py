"""Image Engine - content sniffing and folder scanning.

This package provides the data side of the browser:
- Content-based image classification (mime_sniffer)
- One-level folder scanning into an ordered Gallery (scanner)
- Off-thread scanning with last-request-wins (engine, directory_worker)

Usage:
    from tauview.image_engine import ImageEngine

    engine = ImageEngine()
    engine.gallery_ready.connect(on_gallery_ready)
    engine.open_folder("/path/to/images")
"""

from .engine import ImageEngine
from .mime_sniffer import ImageKind, classify, is_image
from .scanner import Gallery, scan

__all__ = ["Gallery", "ImageEngine", "ImageKind", "classify", "is_image", "scan"]
