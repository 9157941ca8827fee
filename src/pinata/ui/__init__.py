"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .photo_canvas import MarkerTag, PhotoCanvas
from .result_screen import ResultScreen
from .vocabulary_list_panel import VocabularyListPanel

__all__ = ["MainWindow", "PhotoCanvas", "MarkerTag", "ResultScreen", "VocabularyListPanel"]
