"""Tests for the rich-text rendering of vocabulary entries."""

from pinata.core import VocabularyRecord
from pinata.services import Segment
from pinata.ui.vocabulary_list_panel import (
    EMPHASIS_STYLE,
    NO_WORDS_MESSAGE,
    VocabularyListPanel,
    record_to_html,
    segments_to_html,
)


def test_segments_to_html_wraps_emphasized_runs():
    html = segments_to_html([Segment("El ", False), Segment("perro", True), Segment(" corre", False)])

    assert html == f'El <span style="{EMPHASIS_STYLE}">perro</span> corre'


def test_segments_to_html_escapes_markup():
    assert segments_to_html([Segment("<b>&", False)]) == "&lt;b&gt;&amp;"


def test_record_to_html_includes_all_parts():
    record = VocabularyRecord(
        word="correr",
        english="run",
        word_type="verb",
        pronunciation="koh-rehr",
        word_forms=("corro", "corre"),
        sentence="El perro corre",
        translation="The dog runs",
    )

    html = record_to_html(record)

    assert "<b style='font-size: 16px;'>correr</b> - run" in html
    assert "(verb)" in html
    assert "[koh-rehr]" in html
    assert "corro / corre" in html
    assert f'El perro <span style="{EMPHASIS_STYLE}">corre</span>' in html
    assert f'The dog <span style="{EMPHASIS_STYLE}">run</span>s' in html


def test_record_to_html_skips_missing_fields():
    html = record_to_html(VocabularyRecord(word="sol"))

    assert "e.g." not in html
    assert "<br/>" not in html


def test_panel_rows_follow_records(qt_app):
    panel = VocabularyListPanel()
    deleted = []
    panel.delete_requested.connect(deleted.append)

    panel.show_vocabulary([VocabularyRecord(word="sol"), VocabularyRecord(word="luna")])
    assert [row.record_index for row in panel.rows] == [0, 1]

    panel.rows[1].delete_requested.emit(1)
    assert deleted == [1]

    panel.show_no_words()
    assert panel.rows == []
    assert panel.status_label.text() == NO_WORDS_MESSAGE
