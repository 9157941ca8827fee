"""Main entry point for the Pinata application."""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from pinata.coordinators import ResultController
from pinata.io import DatabaseManager
from pinata.services import (
    SUPPORTED_LANGUAGES,
    ExportService,
    FileResponseCache,
    GeminiVocabularyFetcher,
    ImageLoader,
    SampleVocabularyFetcher,
    SettingsManager,
    UsageQuotaService,
)
from pinata.ui import MainWindow, ResultScreen

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Root logging setup; level comes from PINATA_LOG_LEVEL (default INFO)."""
    level_name = (os.getenv("PINATA_LOG_LEVEL") or "INFO").strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Pinata")
    app.setOrganizationName("Pinata")

    # 2. Initialize Infrastructure
    settings_manager = SettingsManager()
    configure_logging()

    data_dir = settings_manager.get_data_dir()
    db_manager = DatabaseManager(data_dir / "pinata.db")
    db_manager.ensure_schema()

    quota_service = UsageQuotaService(db_manager, settings_manager.get_daily_limit())
    response_cache = FileResponseCache(data_dir)

    if settings_manager.is_sample_mode():
        logger.info("Sample mode: using the built-in vocabulary reply")
        fetcher = SampleVocabularyFetcher()
    else:
        fetcher = GeminiVocabularyFetcher()

    # 3. Construct UI
    language = settings_manager.get_target_language()
    result_screen = ResultScreen()
    main_window = MainWindow(SUPPORTED_LANGUAGES, language)
    main_window.set_result_view(result_screen)

    # 4. Instantiate Coordinator (Dependency Injection)
    controller = ResultController(
        main_window=main_window,
        result_view=result_screen,
        fetcher=fetcher,
        quota_service=quota_service,
        settings_manager=settings_manager,
        response_cache=response_cache,
        image_loader=ImageLoader(),
        export_service=ExportService(),
    )

    # 5. Signal Wiring (Connect UI signals to Controller slots)
    main_window.image_opened.connect(
        lambda path: controller.open_session(path, main_window.current_language, result_screen.display_width())
    )
    main_window.language_changed.connect(controller.handle_language_changed)
    main_window.edit_mode_toggled.connect(controller.handle_edit_mode_toggled)
    main_window.export_requested.connect(controller.export_image)

    canvas = result_screen.canvas
    canvas.marker_pressed.connect(controller.handle_marker_pressed)
    canvas.marker_dragged.connect(controller.handle_marker_dragged)
    canvas.marker_released.connect(controller.handle_marker_released)
    canvas.marker_cancelled.connect(controller.handle_marker_cancelled)
    canvas.marker_delete_requested.connect(controller.handle_marker_delete_requested)
    result_screen.list_panel.delete_requested.connect(controller.handle_record_delete_requested)

    # 6. Show UI and start event loop
    main_window.show()

    try:
        return app.exec()
    finally:
        db_manager.close()


if __name__ == "__main__":
    sys.exit(main())
