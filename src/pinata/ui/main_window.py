"""Main Window - Application shell with menus and toolbar."""

from pathlib import Path
from typing import Sequence

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction, QActionGroup
from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox, QVBoxLayout, QWidget

IMAGE_FILTER = "Images (*.jpg *.jpeg *.png)"


class MainWindow(QMainWindow):
    """Provides the application shell, menus and message dialogs."""

    # Signal emitted when user picks a photo
    image_opened = Signal(Path)
    # Signal emitted when the target language changes
    language_changed = Signal(str)
    # Signal emitted when edit mode is switched on/off
    edit_mode_toggled = Signal(bool)
    # Signal emitted with the destination of an export
    export_requested = Signal(Path)

    def __init__(self, languages: Sequence[str], current_language: str):
        super().__init__()
        self.setWindowTitle("Pinata")
        self.setGeometry(100, 100, 780, 900)

        self.current_language = current_language
        self._setup_ui()
        self._create_menu_bar(languages)

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

    def _create_menu_bar(self, languages: Sequence[str]):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        # File menu
        file_menu = menu_bar.addMenu("&File")

        open_action = QAction("&Open Photo...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._on_open_image)
        file_menu.addAction(open_action)

        export_action = QAction("&Export Image...", self)
        export_action.setShortcut("Ctrl+S")
        export_action.triggered.connect(self._on_export)
        file_menu.addAction(export_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Edit menu
        edit_menu = menu_bar.addMenu("&Edit")

        self.edit_mode_action = QAction("&Move Words", self)
        self.edit_mode_action.setShortcut("Ctrl+E")
        self.edit_mode_action.setCheckable(True)
        self.edit_mode_action.toggled.connect(self.edit_mode_toggled.emit)
        edit_menu.addAction(self.edit_mode_action)

        # Language menu, exclusive selection
        language_menu = menu_bar.addMenu("&Language")
        language_group = QActionGroup(self)
        language_group.setExclusive(True)

        for language in languages:
            action = QAction(language.capitalize(), self)
            action.setCheckable(True)
            action.setChecked(language == self.current_language)
            action.triggered.connect(lambda checked=False, lang=language: self._on_language_changed(lang))
            language_group.addAction(action)
            language_menu.addAction(action)

    def _on_language_changed(self, language: str):
        self.current_language = language
        self.language_changed.emit(language)

    def _on_open_image(self):
        """Handle the Open Photo menu action."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select a Photo",
            str(Path.home()),
            IMAGE_FILTER,
        )
        if file_path:
            self.edit_mode_action.setChecked(False)
            self.image_opened.emit(Path(file_path))

    def _on_export(self):
        """Handle the Export Image menu action."""
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Export Image",
            str(Path.home() / "pinata.jpg"),
            "JPEG (*.jpg);;PNG (*.png)",
        )
        if file_path:
            self.export_requested.emit(Path(file_path))

    def set_result_view(self, view):
        """Set the result screen widget in the main layout."""
        self.main_layout.addWidget(view)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)
