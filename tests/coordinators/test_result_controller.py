"""Unit tests for ResultController coordinator."""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pinata.coordinators import ResultController
from pinata.core import ImageSize, MarkerPosition
from pinata.io import DatabaseManager
from pinata.services import (
    FetchResult,
    InMemoryResponseCache,
    SampleVocabularyFetcher,
    UsageQuotaService,
)
from pinata.services.api_workers import VocabularyFetchWorker

IMAGE_PATH = Path("/photos/park.jpg")


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_main_window():
    """Mock MainWindow for testing."""
    window = MagicMock()
    window.show_info = MagicMock()
    window.show_error = MagicMock()
    return window


@pytest.fixture
def mock_view():
    """Mock ResultScreen for testing."""
    return MagicMock()


@pytest.fixture
def mock_image_loader():
    loader = MagicMock()
    loader.read_size.return_value = (1000, 500)
    loader.encode_base64.return_value = "aGVsbG8="
    return loader


@pytest.fixture
def mock_thread_pool():
    return MagicMock()


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(tmp_path / "pinata.db")
    manager.ensure_schema()
    yield manager
    manager.close()


@pytest.fixture
def quota(db):
    return UsageQuotaService(db, daily_limit=3)


@pytest.fixture
def cache():
    return InMemoryResponseCache()


@pytest.fixture
def mock_export_service():
    service = MagicMock()
    service.save.side_effect = lambda pixmap, path: Path(path)
    return service


@pytest.fixture
def controller(
    qt_app, mock_main_window, mock_view, mock_image_loader, mock_thread_pool, quota, cache, mock_export_service
):
    settings = MagicMock()
    settings.get_gemini_api_key.return_value = "key"
    return ResultController(
        main_window=mock_main_window,
        result_view=mock_view,
        fetcher=SampleVocabularyFetcher(),
        quota_service=quota,
        settings_manager=settings,
        response_cache=cache,
        image_loader=mock_image_loader,
        export_service=mock_export_service,
        thread_pool=mock_thread_pool,
        now=lambda: datetime(2026, 1, 19, 12, 0, 0),
    )


def _run_last_worker(thread_pool) -> VocabularyFetchWorker:
    """Run the most recently queued worker synchronously."""
    worker = thread_pool.start.call_args.args[0]
    worker.run()
    return worker


@pytest.fixture
def loaded(controller, mock_thread_pool):
    """Controller with the sample vocabulary loaded on a 300x150 display."""
    controller.open_session(IMAGE_PATH, "spanish", 300)
    _run_last_worker(mock_thread_pool)
    return controller


# ============================================================================
# Session and fetch
# ============================================================================


class TestOpenSession:
    def test_open_session_starts_fetch(self, controller, mock_view, mock_thread_pool, quota):
        assert controller.open_session(IMAGE_PATH, "spanish", 300) is True

        mock_view.show_image.assert_called_once_with(IMAGE_PATH)
        mock_view.show_loading.assert_called_with(True)
        mock_thread_pool.start.assert_called_once()
        assert controller.loading
        assert controller.image_size == ImageSize(300, 150)
        assert quota.remaining_attempts() == 2

    def test_result_is_parsed_rendered_and_cached(self, loaded, mock_view, cache):
        assert [r.word for r in loaded.records][:2] == ["perro", "césped"]
        assert len(loaded.board.markers) == 6
        assert not loaded.loading

        mock_view.show_loading.assert_called_with(False)
        mock_view.show_vocabulary.assert_called_once_with(loaded.records)
        mock_view.render_board.assert_called_with(loaded.board)

        cached = cache.get(loaded._image_key, "spanish")
        assert cached is not None
        assert cached.model == SampleVocabularyFetcher.MODEL_NAME

    def test_markers_use_example_placement(self, loaded):
        # perro at 12%/15% of 300x150 clamps to the marker half-extent
        assert loaded.board.markers[0].position == MarkerPosition(50, 30)

    def test_cached_reply_skips_network_and_quota(self, loaded, mock_thread_pool, quota):
        loaded.open_session(IMAGE_PATH, "spanish", 300)

        assert mock_thread_pool.start.call_count == 1
        assert quota.remaining_attempts() == 2
        assert len(loaded.records) == 6

    def test_quota_exhausted_refuses_without_network(
        self, mock_main_window, mock_view, mock_image_loader, mock_thread_pool, db, cache, mock_export_service
    ):
        controller = ResultController(
            main_window=mock_main_window,
            result_view=mock_view,
            fetcher=SampleVocabularyFetcher(),
            quota_service=UsageQuotaService(db, daily_limit=0),
            settings_manager=MagicMock(),
            response_cache=cache,
            image_loader=mock_image_loader,
            export_service=mock_export_service,
            thread_pool=mock_thread_pool,
        )

        assert controller.open_session(IMAGE_PATH, "spanish", 300) is False

        mock_thread_pool.start.assert_not_called()
        assert mock_main_window.show_info.call_args.args[0] == "Daily Limit Reached"

    def test_unreadable_image_shows_error(self, controller, mock_image_loader, mock_main_window, mock_thread_pool):
        mock_image_loader.read_size.side_effect = RuntimeError("Image path does not exist")

        assert controller.open_session(IMAGE_PATH, "spanish", 300) is False

        assert mock_main_window.show_error.call_args.args[0] == "Image Error"
        mock_thread_pool.start.assert_not_called()

    def test_error_result_shows_no_words(self, controller, mock_view, cache):
        controller.open_session(IMAGE_PATH, "spanish", 300)

        controller.handle_fetch_result(controller._active_worker_id, FetchResult(text="", model="m", error="timeout"))

        assert controller.records == []
        mock_view.show_no_words.assert_called_once()
        assert cache.list_keys() == []

    def test_reply_without_block_shows_no_words(self, controller, mock_view, cache):
        controller.open_session(IMAGE_PATH, "spanish", 300)

        controller.handle_fetch_result(controller._active_worker_id, FetchResult(text="Sorry!", model="m"))

        mock_view.show_no_words.assert_called_once()
        assert cache.list_keys() == []

    def test_worker_crash_shows_no_words(self, controller, mock_view):
        controller.open_session(IMAGE_PATH, "spanish", 300)

        controller.handle_fetch_error(controller._active_worker_id, "boom")

        mock_view.show_no_words.assert_called_once()

    def test_stale_result_is_ignored(self, controller, mock_thread_pool, mock_image_loader):
        controller.open_session(IMAGE_PATH, "spanish", 300)
        stale_worker = mock_thread_pool.start.call_args.args[0]

        mock_image_loader.encode_base64.return_value = "d29ybGQ="
        controller.open_session(Path("/photos/beach.jpg"), "spanish", 300)
        stale_worker.run()

        assert controller.records == []
        assert controller.loading

    def test_language_change_opens_new_session(self, loaded, mock_thread_pool):
        loaded.handle_language_changed("french")

        assert loaded.language == "french"
        assert loaded.records == []
        worker = mock_thread_pool.start.call_args.args[0]
        assert worker.target_language == "french"

    def test_same_language_is_ignored(self, loaded, mock_thread_pool):
        loaded.handle_language_changed("spanish")

        assert mock_thread_pool.start.call_count == 1
        assert len(loaded.records) == 6


class TestLayoutTiming:
    def test_layout_waits_for_image_size(self, controller, mock_image_loader, mock_thread_pool):
        mock_image_loader.read_size.return_value = (0, 0)
        controller.open_session(IMAGE_PATH, "spanish", 300)
        _run_last_worker(mock_thread_pool)

        assert len(controller.records) == 6
        assert controller.board.markers == ()

        controller.handle_image_size(ImageSize(300, 150))

        assert len(controller.board.markers) == 6

    def test_markers_are_laid_out_once(self, loaded):
        loaded.handle_image_size(ImageSize(600, 300))

        assert loaded.board.image_size == ImageSize(300, 150)


# ============================================================================
# Marker interaction
# ============================================================================


class TestMarkerInteraction:
    def test_tap_selects_marker(self, loaded):
        loaded.handle_marker_released(2, False)

        assert loaded.board.selected_index == 2
        assert loaded.board.z_order[-1] == 2

    def test_drag_ignored_outside_edit_mode(self, loaded):
        before = loaded.board.markers[3].position

        loaded.handle_marker_pressed(3)
        loaded.handle_marker_dragged(3, 20, 20)
        loaded.handle_marker_released(3, True)

        assert loaded.board.markers[3].position == before
        assert loaded.board.selected_index is None

    def test_drag_in_edit_mode_moves_marker(self, loaded):
        loaded.handle_edit_mode_toggled(True)
        before = loaded.board.markers[4].position

        loaded.handle_marker_pressed(4)
        assert loaded.board.is_dragging
        assert loaded.board.z_order[-1] == 4

        loaded.handle_marker_dragged(4, 5, 0)
        loaded.handle_marker_dragged(4, 5, 0)
        loaded.handle_marker_released(4, True)

        assert loaded.board.markers[4].position == before.offset(10, 0)
        assert not loaded.board.is_dragging
        assert loaded.board.selected_index is None

    def test_cancelled_drag_keeps_position(self, loaded):
        loaded.handle_edit_mode_toggled(True)
        loaded.handle_marker_pressed(3)
        loaded.handle_marker_dragged(3, 0, 5)
        moved = loaded.board.markers[3].position

        loaded.handle_marker_cancelled(3)

        assert not loaded.board.is_dragging
        assert loaded.board.markers[3].position == moved

    def test_edit_mode_locks_scrolling(self, loaded, mock_view):
        loaded.handle_edit_mode_toggled(True)

        mock_view.scroll_to_top.assert_called_once()
        mock_view.set_scroll_enabled.assert_called_with(False)
        assert loaded.board.edit_mode

        loaded.handle_edit_mode_toggled(False)

        mock_view.set_scroll_enabled.assert_called_with(True)
        assert not loaded.board.edit_mode

    def test_delete_marker_removes_record(self, loaded, mock_view):
        loaded.handle_marker_delete_requested(0)

        assert len(loaded.records) == 5
        assert len(loaded.board.markers) == 5
        assert loaded.records[0].word == "césped"
        assert [m.record_index for m in loaded.board.markers] == list(range(5))
        mock_view.show_vocabulary.assert_called_with(loaded.records)

    def test_delete_last_record_shows_no_words(self, loaded, mock_view):
        for _ in range(6):
            loaded.handle_record_delete_requested(0)

        assert loaded.records == []
        assert loaded.board.markers == ()
        mock_view.show_no_words.assert_called_once()

    def test_delete_out_of_range_raises(self, loaded):
        with pytest.raises(IndexError):
            loaded.handle_record_delete_requested(6)


# ============================================================================
# Export
# ============================================================================


class TestExport:
    def test_export_captures_with_branding(self, loaded, mock_view, mock_export_service, mock_main_window, tmp_path):
        capturing_during_capture = []
        mock_view.capture.side_effect = lambda: capturing_during_capture.append(loaded.board.capturing) or "pixmap"

        saved = loaded.export_image(tmp_path / "out.jpg")

        assert saved == tmp_path / "out.jpg"
        assert capturing_during_capture == [True]
        assert not loaded.board.capturing
        mock_export_service.save.assert_called_once_with("pixmap", tmp_path / "out.jpg")
        title, message = mock_main_window.show_info.call_args.args
        assert title == "Image Saved"
        assert "Check out my vocabulary from Pinata!" in message

    def test_export_failure_shows_error(self, loaded, mock_export_service, mock_main_window, tmp_path):
        mock_export_service.save.side_effect = RuntimeError("disk full")

        assert loaded.export_image(tmp_path / "out.jpg") is None

        assert mock_main_window.show_error.call_args.args[0] == "Export Failed"
        assert not loaded.board.capturing

    def test_export_without_photo(self, controller, mock_main_window, mock_export_service, tmp_path):
        assert controller.export_image(tmp_path / "out.jpg") is None

        mock_export_service.save.assert_not_called()
        assert mock_main_window.show_info.call_args.args[0] == "Nothing to Export"
