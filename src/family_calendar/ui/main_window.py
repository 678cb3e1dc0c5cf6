from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow, QSplitter

from ..config import AppPalette
from ..services import ServiceContext
from ..utils.qt import TaskRunner
from .components.chat_panel import ChatPanel
from .components.event_list import EventListPanel


class MainWindow(QMainWindow):
    def __init__(self, *, context: ServiceContext, palette: AppPalette) -> None:
        super().__init__()
        self.context = context
        self.runner = TaskRunner()

        self.setWindowTitle(context.settings.ui.app_name)
        self.resize(1200, 780)

        self.event_panel = EventListPanel()
        self.chat_panel = ChatPanel(conversation=context.conversation, runner=self.runner, palette=palette)

        splitter = QSplitter()
        splitter.setOrientation(Qt.Orientation.Horizontal)
        splitter.addWidget(self.event_panel)
        splitter.addWidget(self.chat_panel)
        splitter.setStretchFactor(0, 2)
        splitter.setStretchFactor(1, 3)
        self.setCentralWidget(splitter)

        self.chat_panel.turn_finished.connect(self.refresh_events)
        self.refresh_events()

    def refresh_events(self) -> None:
        self.event_panel.populate_events(self.context.conversation.events, self.context.store.tz)
        self.statusBar().showMessage(f"{len(self.context.store)} begivenhed(er) i kalenderen", 4000)
