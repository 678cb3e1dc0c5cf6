from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from ..core import EventStore
from ..domain import parse_timestamp
from ..errors import ToolArgumentError
from .registry import register_api
from .serializers import serialize_event

logger = logging.getLogger(__name__)


def _parse(store: EventStore, field_name: str, value: str) -> datetime:
    try:
        return parse_timestamp(value, store.tz)
    except (TypeError, ValueError) as exc:
        raise ToolArgumentError(f"{field_name} must be an ISO 8601 timestamp, got {value!r}") from exc


@register_api(
    "listEvents",
    description="Hent en liste over begivenheder i kalenderen inden for en given periode.",
    tags=("read",),
    parameters={
        "start": "Start dato (ISO 8601 string) e.g., 2023-10-27T10:00:00",
        "end": "Slut dato (ISO 8601 string)",
    },
)
def list_events(store: EventStore, start: str, end: Optional[str] = None) -> Dict[str, Any]:
    # The range is accepted for the model's benefit; the whole calendar is returned.
    logger.debug("listEvents range %s..%s ignored", start, end)
    return {"events": [serialize_event(event) for event in store.list()]}


@register_api(
    "createEvent",
    description="Opret en ny begivenhed i kalenderen.",
    tags=("write",),
    parameters={
        "summary": "Titlen på begivenheden",
        "start": "Starttidspunkt (ISO 8601)",
        "end": "Sluttidspunkt (ISO 8601)",
        "description": "Valgfri beskrivelse eller noter",
        "location": "Valgfri lokation",
    },
)
def create_event(
    store: EventStore,
    summary: str,
    start: str,
    end: str,
    description: Optional[str] = None,
    location: Optional[str] = None,
) -> Dict[str, Any]:
    event_id = store.create(
        summary=summary,
        start=_parse(store, "start", start),
        end=_parse(store, "end", end),
        description=description,
        location=location,
    )
    return {"status": "created", "id": event_id}


@register_api(
    "updateEvent",
    description="Opdater en eksisterende begivenhed. Angiv ID og de felter der skal ændres.",
    tags=("write",),
    parameters={
        "id": "ID på begivenheden der skal ændres",
        "summary": "Ny titel (valgfri)",
        "start": "Ny starttidspunkt (valgfri)",
        "end": "Ny sluttidspunkt (valgfri)",
        "description": "Ny beskrivelse (valgfri)",
        "location": "Ny lokation (valgfri)",
    },
)
def update_event(
    store: EventStore,
    id: str,
    summary: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    description: Optional[str] = None,
    location: Optional[str] = None,
) -> Dict[str, Any]:
    changes: Dict[str, Any] = {}
    if summary is not None:
        changes["summary"] = summary
    if start is not None:
        changes["start"] = _parse(store, "start", start)
    if end is not None:
        changes["end"] = _parse(store, "end", end)
    if description is not None:
        changes["description"] = description
    if location is not None:
        changes["location"] = location
    updated = store.update(id, changes)
    return {"status": "updated" if updated else "not_found"}


@register_api(
    "deleteEvent",
    description="Slet en begivenhed baseret på ID. Brug listEvents først for at finde ID, hvis du kun kender titlen.",
    tags=("write",),
    parameters={"id": "ID på begivenheden der skal slettes"},
)
def delete_event(store: EventStore, id: str) -> Dict[str, Any]:
    deleted = store.delete(id)
    return {"status": "deleted" if deleted else "not_found"}
