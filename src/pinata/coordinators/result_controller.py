"""Result Controller - owns the vocabulary and markers of one photo session."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, QThreadPool, Slot

from pinata.coordinators import marker_board as board_ops
from pinata.coordinators.marker_board import MarkerBoard
from pinata.core import ImageSize, VocabularyRecord
from pinata.services import (
    SHARE_MESSAGE,
    CachedResponse,
    ExportService,
    FetchResult,
    ImageLoader,
    ResponseCache,
    SettingsManager,
    UsageQuotaService,
    VocabularyFetcher,
    VocabularyParser,
    image_cache_key,
)
from pinata.services.api_workers import VocabularyFetchWorker

logger = logging.getLogger(__name__)


class ResultController(QObject):
    """
    Screen-level owner of the record list and the marker board.

    Responsibilities:
    - Gate the remote request on the daily quota and reuse cached replies.
    - Run the request on the thread pool and parse the reply.
    - Lay markers out once, then apply taps, drags and deletions as board
      transitions, re-rendering after each swap.
    - Toggle edit mode (locks page scrolling) and export the composed view.

    Nothing else mutates ``records`` or ``board``.
    """

    def __init__(
        self,
        main_window,
        result_view,
        fetcher: VocabularyFetcher,
        quota_service: UsageQuotaService,
        settings_manager: SettingsManager,
        response_cache: ResponseCache,
        image_loader: ImageLoader,
        export_service: ExportService,
        parser: Optional[VocabularyParser] = None,
        thread_pool: Optional[QThreadPool] = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        super().__init__()

        self.main_window = main_window
        self.result_view = result_view
        self.fetcher = fetcher
        self.quota_service = quota_service
        self.settings_manager = settings_manager
        self.response_cache = response_cache
        self.image_loader = image_loader
        self.export_service = export_service
        self.parser = parser or VocabularyParser()
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        self._now = now

        # Session state
        self.image_path: Optional[Path] = None
        self.language: Optional[str] = None
        self.image_size = ImageSize(0, 0)
        self.records: List[VocabularyRecord] = []
        self.board = MarkerBoard()
        self.loading = False

        self._image_key: Optional[str] = None
        self._markers_initialized = False
        self._active_worker_id: Optional[int] = None
        self._worker_counter = 0

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def open_session(self, image_path: Path, language: str, display_width: float) -> bool:
        """
        Start a new session for a photo and target language.

        Args:
            image_path: Photo chosen by the user.
            language: Target language of the vocabulary.
            display_width: Width in pixels the photo is shown at.

        Returns:
            True if vocabulary is loading or already available, False if the
            session was refused (unreadable image or daily limit reached).
        """
        self.close_session()
        self.image_path = Path(image_path)
        self.language = language

        try:
            natural_width, natural_height = self.image_loader.read_size(self.image_path)
            image_base64 = self.image_loader.encode_base64(self.image_path)
        except RuntimeError as e:
            logger.warning("Could not open image %s: %s", self.image_path, e)
            self.main_window.show_error("Image Error", f"Could not open image:\n{e}")
            return False

        self._image_key = image_cache_key(image_base64)
        self.result_view.show_image(self.image_path)
        self.handle_image_size(ImageSize.scaled_to_width(natural_width, natural_height, display_width))

        cached = self.response_cache.get(self._image_key, language)
        if cached is not None:
            logger.info("Using cached vocabulary for %s (%s)", self.image_path.name, language)
            self._apply_response(cached.text)
            return True

        if not self.quota_service.has_attempts_left():
            logger.info("Daily limit reached; not requesting vocabulary")
            self.result_view.show_loading(False)
            self.main_window.show_info(
                "Daily Limit Reached",
                "You have used all of today's photo scans.\nPlease come back tomorrow!",
            )
            return False

        remaining = self.quota_service.consume()
        logger.info("Requesting vocabulary (%d attempts left today)", remaining)
        self._start_fetch(image_base64, language)
        return True

    def close_session(self) -> None:
        """Forget the current session; replies still in flight are ignored."""
        self._active_worker_id = None
        self.image_path = None
        self.language = None
        self.image_size = ImageSize(0, 0)
        self.records = []
        self.loading = False
        self._image_key = None
        self._markers_initialized = False
        # Edit mode belongs to the window, not the photo
        self._apply(MarkerBoard(edit_mode=self.board.edit_mode))

    def _start_fetch(self, image_base64: str, language: str) -> None:
        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_worker_id = worker_id
        self.loading = True
        self.result_view.show_loading(True)

        worker = VocabularyFetchWorker(
            fetcher=self.fetcher,
            worker_id=worker_id,
            image_base64=image_base64,
            target_language=language,
            api_key=self.settings_manager.get_gemini_api_key(),
        )
        worker.signals.fetch_result.connect(self.handle_fetch_result)
        worker.signals.error.connect(self.handle_fetch_error)
        self.thread_pool.start(worker)

    # ------------------------------------------------------------------
    # Fetch results
    # ------------------------------------------------------------------

    @Slot(int, object)
    def handle_fetch_result(self, worker_id: int, result: FetchResult) -> None:
        """Parse a finished request. Errors and timeouts become an empty list."""
        if worker_id != self._active_worker_id:
            logger.debug("Ignoring stale vocabulary result from worker %d", worker_id)
            return
        self._active_worker_id = None

        if result.is_error:
            logger.warning("Vocabulary request failed: %s", result.error)
            self._apply_response("")
            return

        records = self._apply_response(result.text)
        if records and self._image_key is not None and self.language is not None:
            self.response_cache.put(
                CachedResponse(
                    image_key=self._image_key,
                    language=self.language,
                    text=result.text,
                    model=result.model,
                    updated_at=self._now(),
                )
            )

    @Slot(int, str)
    def handle_fetch_error(self, worker_id: int, message: str) -> None:
        if worker_id != self._active_worker_id:
            return
        self._active_worker_id = None
        logger.warning("Vocabulary worker crashed: %s", message)
        self._apply_response("")

    def _apply_response(self, text: str) -> List[VocabularyRecord]:
        self.loading = False
        self.result_view.show_loading(False)

        was_empty = not self.records
        self.records = self.parser.parse(text)
        logger.info("Parsed %d vocabulary records", len(self.records))

        if self.records:
            self.result_view.show_vocabulary(list(self.records))
        else:
            self.result_view.show_no_words()

        if was_empty:
            self._maybe_layout_markers()
        return self.records

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def handle_image_size(self, image_size: ImageSize) -> None:
        """Image metadata arrived; lay markers out if records are waiting."""
        self.image_size = image_size
        self._maybe_layout_markers()

    def _maybe_layout_markers(self) -> None:
        # Markers are derived exactly once so a later refresh cannot undo
        # the user's rearrangement.
        if self._markers_initialized or not self.records or not self.image_size.is_known:
            return
        self._markers_initialized = True
        self._apply(board_ops.layout_board(self.board, self.records, self.image_size))

    def _apply(self, board: MarkerBoard) -> None:
        """Swap in a new board and re-render it as a whole."""
        self.board = board
        self.result_view.render_board(board)

    # ------------------------------------------------------------------
    # Marker interaction
    # ------------------------------------------------------------------

    @Slot(int)
    def handle_marker_pressed(self, index: int) -> None:
        """Finger/mouse down on a marker: in edit mode this starts a drag."""
        if not self.board.edit_mode:
            return
        self._apply(board_ops.bring_to_front(board_ops.begin_drag(self.board, index), index))

    @Slot(int, float, float)
    def handle_marker_dragged(self, index: int, dx: float, dy: float) -> None:
        if not self.board.edit_mode:
            return
        self._apply(board_ops.update_drag(self.board, index, dx, dy))

    @Slot(int, bool)
    def handle_marker_released(self, index: int, moved: bool) -> None:
        """Release ends any drag; a release without movement is a tap."""
        board = board_ops.end_drag(self.board, index)
        if not moved:
            board = board_ops.select_or_toggle(board, index)
        self._apply(board)

    @Slot(int)
    def handle_marker_cancelled(self, index: int) -> None:
        self._apply(board_ops.cancel_drag(self.board, index))

    @Slot(int)
    def handle_marker_delete_requested(self, index: int) -> None:
        """Delete a marker from the photo together with its record."""
        record_index = self.board.markers[index].record_index
        self.handle_record_delete_requested(record_index)

    @Slot(int)
    def handle_record_delete_requested(self, record_index: int) -> None:
        """Delete a record from the list together with its marker."""
        if not (0 <= record_index < len(self.records)):
            raise IndexError(f"Record index {record_index} out of range for {len(self.records)} records")

        board = board_ops.delete_record(self.board, record_index)
        records = self.records[:record_index] + self.records[record_index + 1:]

        self.records = records
        self._apply(board)
        if records:
            self.result_view.show_vocabulary(list(records))
        else:
            self.result_view.show_no_words()

    @Slot(bool)
    def handle_edit_mode_toggled(self, enabled: bool) -> None:
        """Edit mode lets markers move and locks the page scroll at the top."""
        if enabled:
            self.result_view.scroll_to_top()
        self.result_view.set_scroll_enabled(not enabled)
        self._apply(board_ops.set_edit_mode(self.board, enabled))

    @Slot(str)
    def handle_language_changed(self, language: str) -> None:
        """A new language needs a new session for the same photo."""
        if self.image_path is None or language == self.language:
            return
        self.open_session(self.image_path, language, self.image_size.width)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    @Slot(Path)
    def export_image(self, output_path: Path) -> Optional[Path]:
        """Capture the photo, markers and list with branding and save it."""
        if self.image_path is None:
            self.main_window.show_info("Nothing to Export", "Open a photo first.")
            return None

        self._apply(board_ops.set_capturing(self.board, True))
        try:
            pixmap = self.result_view.capture()
        finally:
            self._apply(board_ops.set_capturing(self.board, False))

        try:
            saved = self.export_service.save(pixmap, output_path)
        except RuntimeError as e:
            logger.error("Export failed: %s", e)
            self.main_window.show_error("Export Failed", f"Failed to save image:\n{e}")
            return None

        logger.info("Exported result to %s", saved)
        self.main_window.show_info("Image Saved", f"{SHARE_MESSAGE}\n\nSaved to:\n{saved}")
        return saved
