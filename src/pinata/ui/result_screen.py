"""Result Screen - scrollable photo, markers and word list for one session."""

from pathlib import Path
from typing import Sequence

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap, QWheelEvent
from PySide6.QtWidgets import QLabel, QScrollArea, QVBoxLayout, QWidget

from pinata.coordinators.marker_board import MarkerBoard
from pinata.core import ImageSize, VocabularyRecord
from pinata.ui.photo_canvas import PhotoCanvas
from pinata.ui.vocabulary_list_panel import VocabularyListPanel

BRANDING_TEXT = "Created by Pinata"
DEFAULT_DISPLAY_WIDTH = 720


class LockableScrollArea(QScrollArea):
    """Scroll area whose scrolling can be switched off while markers are edited."""

    def __init__(self):
        super().__init__()
        self.scroll_enabled = True

    def set_scroll_enabled(self, enabled: bool):
        self.scroll_enabled = enabled
        policy = Qt.ScrollBarPolicy.ScrollBarAsNeeded if enabled else Qt.ScrollBarPolicy.ScrollBarAlwaysOff
        self.setVerticalScrollBarPolicy(policy)

    def wheelEvent(self, event: QWheelEvent):
        if self.scroll_enabled:
            super().wheelEvent(event)
        else:
            event.ignore()


class ResultScreen(QWidget):
    """View driven by ResultController; holds no session state of its own."""

    def __init__(self, display_width: int = DEFAULT_DISPLAY_WIDTH):
        super().__init__()
        self._display_width = display_width

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.scroll_area = LockableScrollArea()
        self.scroll_area.setWidgetResizable(True)
        layout.addWidget(self.scroll_area)

        # Everything inside `content` is part of the exported image
        self.content = QWidget()
        self.content.setStyleSheet("background-color: #fff;")
        content_layout = QVBoxLayout(self.content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)

        self.canvas = PhotoCanvas()
        content_layout.addWidget(self.canvas, 0, Qt.AlignmentFlag.AlignHCenter)

        self.list_panel = VocabularyListPanel()
        content_layout.addWidget(self.list_panel)

        self.branding_label = QLabel(BRANDING_TEXT)
        self.branding_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.branding_label.setStyleSheet("color: #666; font-size: 16px; font-style: italic; padding: 15px;")
        self.branding_label.hide()
        content_layout.addWidget(self.branding_label)
        content_layout.addStretch()

        self.scroll_area.setWidget(self.content)

    def display_width(self) -> int:
        return self._display_width

    def show_image(self, image_path: Path):
        self.canvas.show_image(image_path)
        pixmap = self.canvas.pixmap
        if pixmap is not None:
            # Size the photo now; markers follow once the words arrive
            self.canvas.set_image_size(
                ImageSize.scaled_to_width(pixmap.width(), pixmap.height(), self._display_width)
            )

    def show_loading(self, loading: bool):
        self.list_panel.show_loading(loading)

    def show_vocabulary(self, records: Sequence[VocabularyRecord]):
        self.list_panel.show_vocabulary(records)

    def show_no_words(self):
        self.list_panel.show_no_words()

    def render_board(self, board: MarkerBoard):
        self.canvas.render_board(board)
        self.branding_label.setVisible(board.capturing)

    def scroll_to_top(self):
        self.scroll_area.verticalScrollBar().setValue(0)

    def set_scroll_enabled(self, enabled: bool):
        self.scroll_area.set_scroll_enabled(enabled)

    def capture(self) -> QPixmap:
        """Grab the composed photo, markers, list and branding as one image."""
        self.content.adjustSize()
        return self.content.grab()
