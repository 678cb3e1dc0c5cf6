from __future__ import annotations

import pytest

from family_calendar.api import call_api, get_api_function, get_api_functions
from family_calendar.core import EventStore
from family_calendar.errors import ToolArgumentError

from conftest import at


def test_contract_declares_four_tools() -> None:
    assert sorted(spec.name for spec in get_api_functions()) == [
        "createEvent",
        "deleteEvent",
        "listEvents",
        "updateEvent",
    ]


@pytest.mark.parametrize(
    ("name", "required", "optional"),
    [
        ("listEvents", ["start"], ["end"]),
        ("createEvent", ["summary", "start", "end"], ["description", "location"]),
        ("updateEvent", ["id"], ["summary", "start", "end", "description", "location"]),
        ("deleteEvent", ["id"], []),
    ],
)
def test_tool_schema(name: str, required: list, optional: list) -> None:
    tool = get_api_function(name).as_tool()

    assert tool["type"] == "function"
    function = tool["function"]
    assert function["name"] == name
    assert function["description"]
    schema = function["parameters"]
    assert schema["type"] == "object"
    assert schema["required"] == required
    assert list(schema["properties"]) == required + optional
    assert "store" not in schema["properties"]
    assert all(prop["type"] == "string" and prop["description"] for prop in schema["properties"].values())


def test_list_events_ignores_range(store: EventStore) -> None:
    store.create(summary="Outside", start=at(1, 8), end=at(1, 9), location="Hallen")
    store.create(summary="Inside", start=at(20, 8), end=at(20, 9))

    result = call_api("listEvents", store, start="2026-10-20T00:00:00", end="2026-10-20T23:59:59")

    assert [event["summary"] for event in result["events"]] == ["Outside", "Inside"]
    assert result["events"][0] == {
        "id": "evt_0001",
        "summary": "Outside",
        "start": "2026-10-01T08:00:00+02:00",
        "end": "2026-10-01T09:00:00+02:00",
        "location": "Hallen",
    }


def test_create_event_interprets_naive_times_in_calendar_zone(store: EventStore) -> None:
    result = call_api("createEvent", store, summary="Tandlæge", start="2026-11-02T10:00:00", end="2026-11-02T11:00:00")

    assert result == {"status": "created", "id": "evt_0001"}
    event = store.get("evt_0001")
    assert event.start.isoformat() == "2026-11-02T10:00:00+01:00"
    assert event.description is None


def test_create_event_accepts_utc_suffix(store: EventStore) -> None:
    call_api("createEvent", store, summary="Møde", start="2026-10-20T08:00:00Z", end="2026-10-20T09:00:00Z")

    assert store.list()[0].start == at(20, 10)


def test_create_event_rejects_bad_timestamp(store: EventStore) -> None:
    with pytest.raises(ToolArgumentError):
        call_api("createEvent", store, summary="X", start="i morgen", end="2026-10-20T09:00:00")
    assert len(store) == 0


def test_create_event_requires_summary(store: EventStore) -> None:
    with pytest.raises(ToolArgumentError):
        call_api("createEvent", store, start="2026-10-20T08:00:00", end="2026-10-20T09:00:00")


def test_unexpected_argument_is_rejected(store: EventStore) -> None:
    with pytest.raises(ToolArgumentError):
        call_api("deleteEvent", store, id="evt_0001", force=True)


def test_update_event_statuses(store: EventStore) -> None:
    event_id = store.create(summary="A", start=at(20, 8), end=at(20, 9))

    assert call_api("updateEvent", store, id=event_id, location="Odense") == {"status": "updated"}
    assert call_api("updateEvent", store, id="evt_missing", location="Odense") == {"status": "not_found"}
    assert store.get(event_id).location == "Odense"
    assert store.get(event_id).summary == "A"


def test_update_event_parses_new_start(store: EventStore) -> None:
    event_id = store.create(summary="A", start=at(20, 8), end=at(20, 9))

    call_api("updateEvent", store, id=event_id, start="2026-10-21T08:00:00", end="2026-10-21T09:00:00")

    assert store.get(event_id).start == at(21, 8)


def test_delete_event_statuses(store: EventStore) -> None:
    event_id = store.create(summary="A", start=at(20, 8), end=at(20, 9))

    assert call_api("deleteEvent", store, id=event_id) == {"status": "deleted"}
    assert call_api("deleteEvent", store, id=event_id) == {"status": "not_found"}


def test_unknown_tool_raises_key_error(store: EventStore) -> None:
    with pytest.raises(KeyError):
        call_api("sendEmail", store)


@pytest.mark.parametrize(
    "arguments",
    [
        {"summary": 123, "start": "2026-10-20T08:00:00", "end": "2026-10-20T09:00:00"},
        {"summary": "Møde", "start": "2026-10-20T08:00:00", "end": "2026-10-20T09:00:00", "location": ["Odense"]},
        {"summary": "Møde", "start": "2026-10-20T08:00:00", "end": "2026-10-20T09:00:00", "description": 7},
    ],
)
def test_create_event_rejects_non_string_values(store: EventStore, arguments: dict) -> None:
    with pytest.raises(ToolArgumentError):
        call_api("createEvent", store, **arguments)
    assert len(store) == 0


def test_update_event_rejects_non_string_values(store: EventStore) -> None:
    event_id = store.create(summary="A", start=at(20, 8), end=at(20, 9), location="Hallen")

    with pytest.raises(ToolArgumentError):
        call_api("updateEvent", store, id=event_id, location=42)
    with pytest.raises(ToolArgumentError):
        call_api("updateEvent", store, id=event_id, summary={"text": "B"})

    event = store.get(event_id)
    assert event.summary == "A"
    assert event.location == "Hallen"


def test_required_argument_cannot_be_null(store: EventStore) -> None:
    with pytest.raises(ToolArgumentError):
        call_api("deleteEvent", store, id=None)
