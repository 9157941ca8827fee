"""Export service - writes the composed result view to an image file."""

from pathlib import Path

from PySide6.QtGui import QPixmap

SHARE_MESSAGE = "Check out my vocabulary from Pinata!"


class ExportService:
    """Saves captured views as JPEG (quality 80) or PNG, chosen by suffix."""

    JPEG_QUALITY = 80

    def save(self, pixmap: QPixmap, output_path: Path) -> Path:
        """Write ``pixmap`` to ``output_path``.

        Raises:
            RuntimeError: If the capture is empty or the file cannot be written.
        """
        out_path = Path(output_path)
        if pixmap.isNull():
            raise RuntimeError("Nothing to export: captured image is empty")

        if out_path.suffix.lower() == ".png":
            image_format, quality = "PNG", -1
        else:
            if out_path.suffix.lower() not in (".jpg", ".jpeg"):
                out_path = out_path.with_suffix(".jpg")
            image_format, quality = "JPG", self.JPEG_QUALITY

        out_path.parent.mkdir(parents=True, exist_ok=True)
        if not pixmap.save(str(out_path), image_format, quality):
            raise RuntimeError(f"Failed to save image: {out_path}")

        return out_path
