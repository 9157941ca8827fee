"""Tests for PhotoCanvas and ResultScreen rendering of a MarkerBoard."""

import pytest

from pinata.coordinators import marker_board as ops
from pinata.coordinators.marker_board import MarkerBoard
from pinata.core import ImageSize, Location, VocabularyRecord
from pinata.ui import PhotoCanvas, ResultScreen


@pytest.fixture
def board():
    records = [
        VocabularyRecord(word="perro", english="dog", location=Location(50, 50)),
        VocabularyRecord(word="sol", english="sun", location=Location(0, 0)),
    ]
    return ops.layout_board(MarkerBoard(), records, ImageSize(300, 200))


def test_render_board_creates_one_tag_per_marker(qt_app, board):
    canvas = PhotoCanvas()

    canvas.render_board(board)

    assert len(canvas.tags) == 2
    assert canvas.tags[0].word_label.text() == "perro"
    assert canvas.tags[1].english_label.text() == "sun"
    assert (canvas.width(), canvas.height()) == (300, 200)


def test_tags_are_drawn_around_marker_centre(qt_app, board):
    canvas = PhotoCanvas()

    canvas.render_board(board)

    # (150, 100) centre minus the 50x30 half extent
    assert (canvas.tags[0].x(), canvas.tags[0].y()) == (100, 70)
    assert (canvas.tags[1].x(), canvas.tags[1].y()) == (0, 0)


def test_tags_are_reused_while_count_is_stable(qt_app, board):
    canvas = PhotoCanvas()
    canvas.render_board(board)
    first_tags = list(canvas.tags)

    canvas.render_board(ops.select_or_toggle(board, 0))
    assert canvas.tags == first_tags

    canvas.render_board(ops.delete_marker(board, 0))
    assert len(canvas.tags) == 1


def test_tags_stack_in_board_paint_order(qt_app, board):
    canvas = PhotoCanvas()
    canvas.render_board(board)

    canvas.render_board(ops.bring_to_front(board, 0))

    stacked = [child for child in canvas.children() if child in canvas.tags]
    assert stacked == [canvas.tags[1], canvas.tags[0]]


def test_delete_button_only_for_selected_marker_in_edit_mode(qt_app, board):
    canvas = PhotoCanvas()

    canvas.render_board(ops.select_or_toggle(board, 1))
    assert canvas.tags[1].delete_button.isHidden()

    canvas.render_board(ops.set_edit_mode(ops.select_or_toggle(board, 1), True))
    assert not canvas.tags[1].delete_button.isHidden()
    assert canvas.tags[0].delete_button.isHidden()


def test_tag_signals_are_forwarded(qt_app, board):
    canvas = PhotoCanvas()
    canvas.render_board(board)
    pressed, deleted = [], []
    canvas.marker_pressed.connect(pressed.append)
    canvas.marker_delete_requested.connect(deleted.append)

    canvas.tags[1].pressed.emit(1)
    canvas.tags[0].delete_requested.emit(0)

    assert pressed == [1]
    assert deleted == [0]


def test_result_screen_branding_follows_capturing_flag(qt_app, board):
    screen = ResultScreen()

    screen.render_board(ops.set_capturing(board, True))
    assert not screen.branding_label.isHidden()

    screen.render_board(board)
    assert screen.branding_label.isHidden()


def test_result_screen_scroll_lock(qt_app):
    screen = ResultScreen()

    screen.set_scroll_enabled(False)
    assert not screen.scroll_area.scroll_enabled

    screen.set_scroll_enabled(True)
    assert screen.scroll_area.scroll_enabled
