"""Vocabulary List Panel - text view of the words found in the photo."""

import html
from typing import List, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pinata.core import VocabularyRecord
from pinata.services import Segment, highlight

EMPHASIS_STYLE = "font-weight: bold; color: #007AFF;"
NO_WORDS_MESSAGE = "No words found. Try another photo."


def segments_to_html(segments: Sequence[Segment]) -> str:
    """Render highlighter segments as escaped rich text."""
    parts = []
    for segment in segments:
        text = html.escape(segment.text)
        if segment.emphasized:
            parts.append(f'<span style="{EMPHASIS_STYLE}">{text}</span>')
        else:
            parts.append(text)
    return "".join(parts)


def record_to_html(record: VocabularyRecord) -> str:
    """Rich text for one list entry: headword, forms, example and translation."""
    header = f"<b style='font-size: 16px;'>{html.escape(record.word)}</b>"
    if record.english:
        header += f" - {html.escape(record.english)}"
    if record.word_type:
        header += f" <i style='color: #666; font-size: 12px;'>({html.escape(record.word_type)})</i>"
    if record.pronunciation:
        header += f" <span style='color: #666;'>[{html.escape(record.pronunciation)}]</span>"

    lines = [header]
    if record.word_forms:
        forms = " / ".join(html.escape(form) for form in record.word_forms)
        lines.append(f"<span style='color: #666;'>{forms}</span>")
    if record.sentence:
        example = "e.g. " + segments_to_html(highlight(record.sentence, record.highlight_targets))
        if record.translation:
            translation = segments_to_html(highlight(record.translation, [record.english]))
            example += f" <span style='color: #666;'>({translation})</span>"
        lines.append(example)

    return "<br/>".join(lines)


class VocabularyRow(QFrame):
    """A single list entry with a remove button."""

    delete_requested = Signal(int)

    def __init__(self, record_index: int, record: VocabularyRecord, parent=None):
        super().__init__(parent)
        self.record_index = record_index
        self.setStyleSheet("VocabularyRow { border-bottom: 1px solid #ddd; }")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 10, 0, 10)

        self.label = QLabel(record_to_html(record))
        self.label.setTextFormat(Qt.TextFormat.RichText)
        self.label.setWordWrap(True)
        layout.addWidget(self.label, 1)

        remove_button = QPushButton("Remove")
        remove_button.setFixedWidth(72)
        remove_button.clicked.connect(lambda: self.delete_requested.emit(self.record_index))
        layout.addWidget(remove_button, 0, Qt.AlignmentFlag.AlignTop)


class VocabularyListPanel(QWidget):
    """
    Lists every record under the photo, including records without a marker.

    Signals:
        delete_requested: Emitted with the record index when Remove is clicked.
    """

    delete_requested = Signal(int)

    def __init__(self):
        super().__init__()
        self.rows: List[VocabularyRow] = []

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(15, 0, 15, 10)

        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status_label.setStyleSheet("color: #666; padding: 20px;")
        self._layout.addWidget(self.status_label)

    def show_loading(self, loading: bool):
        if loading:
            self._clear_rows()
            self.status_label.setText("Finding words...")
            self.status_label.show()
        elif not self.rows:
            self.status_label.setText("")

    def show_no_words(self):
        self._clear_rows()
        self.status_label.setText(NO_WORDS_MESSAGE)
        self.status_label.show()

    def show_vocabulary(self, records: Sequence[VocabularyRecord]):
        """Rebuild the list from the current records."""
        self._clear_rows()
        self.status_label.hide()
        for index, record in enumerate(records):
            row = VocabularyRow(index, record)
            row.delete_requested.connect(self.delete_requested.emit)
            self._layout.addWidget(row)
            self.rows.append(row)

    def _clear_rows(self):
        for row in self.rows:
            self._layout.removeWidget(row)
            row.deleteLater()
        self.rows = []
