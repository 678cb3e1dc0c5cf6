from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Any, Optional
from uuid import uuid4

from .enums import ChatRole


def parse_timestamp(value: Any, default_tz: Optional[tzinfo] = None) -> datetime:
    """Parse ISO-8601 text into an aware ``datetime``.

    Naive values are interpreted in ``default_tz`` (UTC when omitted).
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Unsupported timestamp value: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz or timezone.utc)
    return parsed


@dataclass(slots=True)
class CalendarEvent:
    id: str
    summary: str
    start: datetime
    end: datetime
    description: Optional[str] = None
    location: Optional[str] = None


@dataclass(slots=True, frozen=True)
class ChatMessage:
    role: ChatRole
    text: str
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    is_error: bool = False
