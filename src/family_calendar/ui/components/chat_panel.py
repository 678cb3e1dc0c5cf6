from __future__ import annotations

import html

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLineEdit, QPushButton, QTextBrowser, QVBoxLayout, QWidget

from ...config import AppPalette
from ...domain import ChatMessage, ChatRole
from ...errors import TurnInProgressError
from ...services import Conversation
from ...utils.qt import TaskRunner


class ChatPanel(QWidget):
    turn_finished = pyqtSignal()

    def __init__(self, *, conversation: Conversation, runner: TaskRunner, palette: AppPalette) -> None:
        super().__init__()
        self.conversation = conversation
        self.runner = runner
        self.palette = palette

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.transcript = QTextBrowser()
        self.transcript.setObjectName("chatTranscript")
        self.transcript.setOpenExternalLinks(False)
        layout.addWidget(self.transcript, stretch=1)

        input_row = QHBoxLayout()
        self.input_line = QLineEdit()
        self.input_line.setPlaceholderText("Skriv en besked, f.eks. 'Book tandlæge i morgen kl. 10'")
        self.input_line.returnPressed.connect(self._send)
        input_row.addWidget(self.input_line)

        self.send_button = QPushButton("Send")
        self.send_button.clicked.connect(self._send)
        input_row.addWidget(self.send_button)
        layout.addLayout(input_row)

        for message in conversation.messages:
            self.append_message(message)

    def append_message(self, message: ChatMessage) -> None:
        prefix = "Dig" if message.role is ChatRole.USER else "Assistent"
        text = html.escape(message.text).replace("\n", "<br>")
        color = self.palette.accent_error if message.is_error else self.palette.text_primary
        stamp = message.timestamp.astimezone().strftime("%H:%M")
        self.transcript.append(
            f'<p style="color:{color}"><b>{prefix}</b> '
            f'<span style="color:{self.palette.text_secondary}">{stamp}</span><br>{text}</p>'
        )

    def _set_busy(self, busy: bool) -> None:
        self.input_line.setEnabled(not busy)
        self.send_button.setEnabled(not busy)
        if not busy:
            self.input_line.setFocus()

    def _send(self) -> None:
        message = self.input_line.text().strip()
        if not message or self.conversation.busy:
            return
        self.input_line.clear()
        self._set_busy(True)
        self.append_message(ChatMessage(role=ChatRole.USER, text=message))

        def done(reply: ChatMessage) -> None:
            self.append_message(reply)
            self._set_busy(False)
            self.turn_finished.emit()

        def fail(exc: Exception) -> None:
            self._set_busy(False)
            if isinstance(exc, TurnInProgressError):
                return
            self.transcript.append(f"<p style='color:{self.palette.accent_error}'>{html.escape(str(exc))}</p>")

        self.runner.submit(self.conversation.submit, message, on_success=done, on_error=fail)
