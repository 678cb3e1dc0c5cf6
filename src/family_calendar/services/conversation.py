from __future__ import annotations

import logging
import threading
from typing import List

from ..core import EventStore
from ..domain import CalendarEvent, ChatMessage, ChatRole
from ..errors import TurnInProgressError
from ..orchestrator import CalendarOrchestrator
from ..orchestrator.prompts import WELCOME_MESSAGE

logger = logging.getLogger(__name__)


class Conversation:
    """Owns the chat transcript and serializes turns into the orchestrator."""

    def __init__(self, orchestrator: CalendarOrchestrator, *, calendar_name: str) -> None:
        self.orchestrator = orchestrator
        self._lock = threading.Lock()
        self._messages: List[ChatMessage] = [
            ChatMessage(role=ChatRole.MODEL, text=WELCOME_MESSAGE.format(calendar_name=calendar_name), id="welcome")
        ]

    @property
    def store(self) -> EventStore:
        return self.orchestrator.store

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    @property
    def events(self) -> List[CalendarEvent]:
        return self.store.list()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def submit(self, text: str) -> ChatMessage:
        """Run one turn and return the model's transcript entry."""

        cleaned = text.strip()
        if not cleaned:
            raise ValueError("Message text must not be blank.")
        if not self._lock.acquire(blocking=False):
            raise TurnInProgressError("A message is already being processed.")
        try:
            self._messages.append(ChatMessage(role=ChatRole.USER, text=cleaned))
            result = self.orchestrator.run_turn(cleaned)
            reply = ChatMessage(role=ChatRole.MODEL, text=result.text, is_error=result.is_error)
            self._messages.append(reply)
            logger.info(
                "Turn finished: %d tool call(s), %d event(s), error=%s",
                len(result.invocations),
                len(self.store),
                result.is_error,
            )
            return reply
        finally:
            self._lock.release()
