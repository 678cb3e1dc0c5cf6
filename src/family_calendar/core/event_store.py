from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Any, List, Mapping, Optional

from ..domain import CalendarEvent

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"summary", "start", "end", "description", "location"})


class EventStore:
    """In-memory event collection kept sorted ascending by ``start``.

    Failures are reported as return values; none of the operations raise for a
    missing id.
    """

    def __init__(self, *, tz: tzinfo = timezone.utc, id_prefix: str = "evt") -> None:
        self.tz = tz
        self._events: List[CalendarEvent] = []
        self._id_prefix = id_prefix
        self._counter = 0

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        return any(event.id == event_id for event in self._events)

    def list(self) -> List[CalendarEvent]:
        return list(self._events)

    def get(self, event_id: str) -> Optional[CalendarEvent]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def create(
        self,
        *,
        summary: str,
        start: datetime,
        end: datetime,
        description: Optional[str] = None,
        location: Optional[str] = None,
    ) -> str:
        event_id = self._next_id()
        self._events.append(
            CalendarEvent(
                id=event_id,
                summary=summary,
                start=start,
                end=end,
                description=description,
                location=location,
            )
        )
        self._sort()
        logger.debug("Created event %s (%s)", event_id, summary)
        return event_id

    def update(self, event_id: str, changes: Mapping[str, Any]) -> bool:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
        event = self.get(event_id)
        if event is None:
            return False
        for name, value in changes.items():
            setattr(event, name, value)
        if "start" in changes:
            self._sort()
        logger.debug("Updated event %s fields=%s", event_id, sorted(changes))
        return True

    def delete(self, event_id: str) -> bool:
        remaining = [event for event in self._events if event.id != event_id]
        if len(remaining) == len(self._events):
            return False
        self._events = remaining
        logger.debug("Deleted event %s", event_id)
        return True

    def _next_id(self) -> str:
        self._counter += 1
        return f"{self._id_prefix}_{self._counter:04d}"

    def _sort(self) -> None:
        # list.sort is stable, so equal starts keep insertion order.
        self._events.sort(key=lambda event: event.start)


__all__ = ["EventStore", "UPDATABLE_FIELDS"]
