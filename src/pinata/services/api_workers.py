"""Async worker for the non-blocking vocabulary request using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from pinata.services.fetching import FetchResult, VocabularyFetcher


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(int, str)  # worker_id, message
    fetch_result = Signal(int, object)  # worker_id, FetchResult


class VocabularyFetchWorker(QRunnable):
    """
    Worker that runs the vocabulary request in a background thread.

    Uses Qt's thread pool for efficient thread management. Results are tagged
    with ``worker_id`` so the controller can drop replies for a closed session.
    """

    def __init__(
        self,
        fetcher: VocabularyFetcher,
        worker_id: int,
        image_base64: str,
        target_language: str,
        api_key: str | None,
    ):
        super().__init__()
        self.fetcher = fetcher
        self.worker_id = worker_id
        self.image_base64 = image_base64
        self.target_language = target_language
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the vocabulary request in background thread."""
        try:
            result: FetchResult = self.fetcher.fetch(
                image_base64=self.image_base64,
                target_language=self.target_language,
                api_key=self.api_key,
            )
            self.signals.fetch_result.emit(self.worker_id, result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by the fetcher
            self.signals.error.emit(self.worker_id, f"Unexpected vocabulary error: {e}")
        finally:
            self.signals.finished.emit()
