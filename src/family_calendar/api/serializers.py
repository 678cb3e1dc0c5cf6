from __future__ import annotations

from typing import Any, Dict

from ..domain import CalendarEvent, ChatMessage
from .models import EventPayload, MessagePayload


def serialize_event(event: CalendarEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(exclude_none=True)


def serialize_message(message: ChatMessage) -> Dict[str, Any]:
    return MessagePayload.from_domain(message).model_dump()
