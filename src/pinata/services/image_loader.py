"""Image loading service - metadata and encoding for the selected photo.

Uses Qt's QImageReader so dimensions are read from the header without
decoding the full image.

Fail-fast philosophy: methods raise RuntimeError on failure.
"""

import base64
from pathlib import Path
from typing import Tuple

from PySide6.QtGui import QImageReader

SUPPORTED_SUFFIXES = (".jpg", ".jpeg", ".png")


class ImageLoader:
    """Reads the natural size and base64 payload of a photo on disk."""

    def read_size(self, image_path: Path) -> Tuple[int, int]:
        """Return the natural (width, height) of an image.

        Raises:
            RuntimeError: If the file is missing or not a readable image.
        """
        img_path = Path(image_path)
        if not img_path.exists():
            raise RuntimeError(f"Image path does not exist: {img_path}")

        reader = QImageReader(str(img_path))
        size = reader.size()
        if not size.isValid():
            raise RuntimeError(f"Failed to read image size: {img_path} ({reader.errorString()})")

        return size.width(), size.height()

    def encode_base64(self, image_path: Path) -> str:
        """Return the file contents as base64 text for the vision request.

        Raises:
            RuntimeError: If the file is missing, unsupported, or unreadable.
        """
        img_path = Path(image_path)
        if img_path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise RuntimeError(f"Unsupported image type: {img_path.suffix or img_path.name}")
        try:
            return base64.b64encode(img_path.read_bytes()).decode("ascii")
        except OSError as e:
            raise RuntimeError(f"Failed to read image: {img_path}: {e}") from e
