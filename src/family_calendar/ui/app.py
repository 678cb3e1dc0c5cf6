from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette
from ..services import ServiceContext
from .main_window import MainWindow
from .styles.theme import apply_palette


def run_gui() -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    palette = AppPalette()
    apply_palette(app, palette)

    window = MainWindow(context=ServiceContext(), palette=palette)
    window.show()
    sys.exit(app.exec())
