"""Domain models for the family calendar."""

from __future__ import annotations

from .enums import ChatRole
from .models import CalendarEvent, ChatMessage, parse_timestamp

__all__ = ["CalendarEvent", "ChatMessage", "ChatRole", "parse_timestamp"]
