from __future__ import annotations

from datetime import tzinfo
from typing import Iterable

from PyQt6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from ...core.formatting import format_event_time
from ...domain import CalendarEvent


class EventCard(QFrame):
    def __init__(self, event: CalendarEvent, tz: tzinfo) -> None:
        super().__init__()
        self.setObjectName("eventCard")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 12, 14, 12)
        layout.setSpacing(4)

        title = QLabel(event.summary)
        title.setObjectName("eventTitle")
        title.setWordWrap(True)
        layout.addWidget(title)

        meta = format_event_time(event.start, event.end, tz)
        if event.location:
            meta += f"  ·  {event.location}"
        meta_label = QLabel(meta)
        meta_label.setObjectName("eventMeta")
        layout.addWidget(meta_label)

        if event.description:
            description = QLabel(event.description)
            description.setWordWrap(True)
            layout.addWidget(description)


class EventListPanel(QWidget):
    """Read-only list of every event in the calendar."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("eventPanel")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        heading = QLabel("Kommende begivenheder")
        heading.setObjectName("panelTitle")
        layout.addWidget(heading)

        self.count_label = QLabel("")
        self.count_label.setObjectName("panelHint")
        layout.addWidget(self.count_label)

        self._cards = QWidget()
        self._cards_layout = QVBoxLayout(self._cards)
        self._cards_layout.setContentsMargins(0, 0, 0, 0)
        self._cards_layout.setSpacing(10)
        self._cards_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(self._cards)
        layout.addWidget(scroll, stretch=1)

    def populate_events(self, events: Iterable[CalendarEvent], tz: tzinfo) -> None:
        while self._cards_layout.count() > 1:
            item = self._cards_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        count = 0
        for event in events:
            self._cards_layout.insertWidget(count, EventCard(event, tz))
            count += 1
        self.count_label.setText("Ingen begivenheder" if count == 0 else f"{count} begivenhed(er)")
