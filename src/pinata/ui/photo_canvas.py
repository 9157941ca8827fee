"""Photo Canvas - draws the photo with draggable vocabulary tags on top."""

from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QPointF, QSize, Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPixmap
from PySide6.QtWidgets import QFrame, QLabel, QToolButton, QVBoxLayout, QWidget

from pinata.coordinators.marker_board import MarkerBoard
from pinata.core import ImageSize, Marker
from pinata.core.layout import MARKER_HEIGHT, MARKER_WIDTH

# Pointer travel (px) before a press counts as a drag instead of a tap
TAP_SLOP = 3

_TAG_STYLE = """
MarkerTag {{
    background-color: rgba(255, 255, 255, 230);
    border: {border};
    border-radius: 8px;
}}
"""


class MarkerTag(QFrame):
    """One vocabulary tag. Reports raw pointer deltas; never moves itself."""

    pressed = Signal(int)
    dragged = Signal(int, float, float)  # index, dx, dy since the previous move event
    released = Signal(int, bool)  # index, moved
    cancelled = Signal(int)
    delete_requested = Signal(int)

    def __init__(self, index: int, parent=None):
        super().__init__(parent)
        self.index = index
        self._last_pos: Optional[QPointF] = None
        self._travel = 0.0
        self.setFixedSize(QSize(MARKER_WIDTH, MARKER_HEIGHT))
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        layout.setSpacing(0)

        self.word_label = QLabel()
        self.word_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.word_label.setStyleSheet("color: #000; font-size: 16px; font-weight: bold;")
        layout.addWidget(self.word_label)

        self.english_label = QLabel()
        self.english_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.english_label.setStyleSheet("color: #333; font-size: 12px; font-style: italic;")
        layout.addWidget(self.english_label)

        self.delete_button = QToolButton(self)
        self.delete_button.setText("×")
        self.delete_button.setFixedSize(18, 18)
        self.delete_button.move(MARKER_WIDTH - 20, 2)
        self.delete_button.clicked.connect(lambda: self.delete_requested.emit(self.index))
        self.delete_button.hide()

    def update_marker(self, index: int, marker: Marker, selected: bool, edit_mode: bool):
        self.index = index
        self.word_label.setText(marker.record.word)
        self.english_label.setText(marker.record.english)
        border = "2px solid #007AFF" if selected else "1px solid rgba(255, 255, 255, 200)"
        self.setStyleSheet(_TAG_STYLE.format(border=border))
        self.delete_button.setVisible(selected and edit_mode)
        # Positions are marker centres; the tag is drawn around them
        self.move(int(marker.position.left - MARKER_WIDTH / 2), int(marker.position.top - MARKER_HEIGHT / 2))

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self._last_pos = event.globalPosition()
        self._travel = 0.0
        self.pressed.emit(self.index)

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._last_pos is None:
            super().mouseMoveEvent(event)
            return
        pos = event.globalPosition()
        dx = pos.x() - self._last_pos.x()
        dy = pos.y() - self._last_pos.y()
        self._last_pos = pos
        self._travel += abs(dx) + abs(dy)
        if self._travel >= TAP_SLOP:
            self.dragged.emit(self.index, dx, dy)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if self._last_pos is None:
            super().mouseReleaseEvent(event)
            return
        self._last_pos = None
        self.released.emit(self.index, self._travel >= TAP_SLOP)

    def hideEvent(self, event):
        # A tag hidden mid-gesture never sees its release
        if self._last_pos is not None:
            self._last_pos = None
            self.cancelled.emit(self.index)
        super().hideEvent(event)


class PhotoCanvas(QWidget):
    """Renders the photo at its display size and one MarkerTag per marker.

    Signals mirror MarkerTag's, re-emitted with the marker index.
    """

    marker_pressed = Signal(int)
    marker_dragged = Signal(int, float, float)
    marker_released = Signal(int, bool)
    marker_cancelled = Signal(int)
    marker_delete_requested = Signal(int)

    def __init__(self):
        super().__init__()
        self.pixmap: Optional[QPixmap] = None
        self.tags: List[MarkerTag] = []

    def show_image(self, image_path: Path):
        pixmap = QPixmap(str(image_path))
        self.pixmap = None if pixmap.isNull() else pixmap
        self.update()

    def set_image_size(self, image_size: ImageSize):
        if image_size.is_known:
            self.setFixedSize(int(image_size.width), int(image_size.height))

    def render_board(self, board: MarkerBoard):
        """Sync the tags with the board; tags are reused so a drag keeps its grab."""
        self.set_image_size(board.image_size)

        if len(self.tags) != len(board.markers):
            self._rebuild_tags(len(board.markers))

        for index, marker in enumerate(board.markers):
            self.tags[index].update_marker(index, marker, board.is_selected(index), board.edit_mode)

        for index, _ in board.markers_back_to_front():
            self.tags[index].raise_()

    def _rebuild_tags(self, count: int):
        for tag in self.tags:
            tag.blockSignals(True)
            tag.hide()
            tag.deleteLater()
        self.tags = []
        for index in range(count):
            tag = MarkerTag(index, self)
            tag.pressed.connect(self.marker_pressed.emit)
            tag.dragged.connect(self.marker_dragged.emit)
            tag.released.connect(self.marker_released.emit)
            tag.cancelled.connect(self.marker_cancelled.emit)
            tag.delete_requested.connect(self.marker_delete_requested.emit)
            tag.show()
            self.tags.append(tag)

    def paintEvent(self, event):
        if self.pixmap is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.drawPixmap(self.rect(), self.pixmap)
        painter.end()
