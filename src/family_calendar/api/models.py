from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import CalendarEvent, ChatMessage


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    summary: str
    start: str
    end: str
    description: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventPayload":
        return cls(
            id=event.id,
            summary=event.summary,
            start=_iso(event.start),
            end=_iso(event.end),
            description=event.description,
            location=event.location,
        )


class MessagePayload(BaseModel):
    id: str
    role: str
    text: str
    timestamp: str
    is_error: bool = Field(default=False)

    @classmethod
    def from_domain(cls, message: ChatMessage) -> "MessagePayload":
        return cls(
            id=message.id,
            role=message.role.value,
            text=message.text,
            timestamp=_iso(message.timestamp),
            is_error=message.is_error,
        )


def _iso(value: datetime) -> str:
    return value.isoformat()
