from __future__ import annotations

from datetime import timedelta

import pytest

from family_calendar.core import EventStore, seed_demo_events

from conftest import TZ, at


def _starts(store: EventStore) -> list:
    return [event.start for event in store.list()]


def test_create_keeps_collection_sorted_by_start(store: EventStore) -> None:
    store.create(summary="Late", start=at(20, 18), end=at(20, 19))
    store.create(summary="Early", start=at(20, 8), end=at(20, 9))
    store.create(summary="Middle", start=at(20, 12), end=at(20, 13))

    assert [event.summary for event in store.list()] == ["Early", "Middle", "Late"]


def test_create_returns_unique_ids(store: EventStore) -> None:
    first = store.create(summary="A", start=at(20, 8), end=at(20, 9))
    second = store.create(summary="A", start=at(20, 8), end=at(20, 9))

    assert first != second
    assert {event.id for event in store.list()} == {first, second}


def test_ids_are_never_reused_after_delete(store: EventStore) -> None:
    first = store.create(summary="A", start=at(20, 8), end=at(20, 9))
    assert store.delete(first)

    second = store.create(summary="B", start=at(20, 8), end=at(20, 9))

    assert second != first


def test_equal_starts_keep_insertion_order(store: EventStore) -> None:
    store.create(summary="First", start=at(21, 10), end=at(21, 11))
    store.create(summary="Second", start=at(21, 10), end=at(21, 12))

    assert [event.summary for event in store.list()] == ["First", "Second"]


def test_update_missing_id_changes_nothing(store: EventStore) -> None:
    store.create(summary="A", start=at(20, 8), end=at(20, 9))
    before = [(event.id, event.summary, event.start) for event in store.list()]

    assert store.update("evt_9999", {"summary": "Changed"}) is False
    assert [(event.id, event.summary, event.start) for event in store.list()] == before


def test_update_merges_only_given_fields(store: EventStore) -> None:
    event_id = store.create(
        summary="Familie Frokost",
        start=at(22, 12),
        end=at(22, 14),
        description="Hos Mormor",
        location="Hallen",
    )

    assert store.update(event_id, {"location": "Odense"}) is True

    event = store.get(event_id)
    assert event is not None
    assert event.location == "Odense"
    assert event.summary == "Familie Frokost"
    assert event.description == "Hos Mormor"
    assert event.start == at(22, 12)
    assert event.end == at(22, 14)


def test_update_start_resorts(store: EventStore) -> None:
    moved = store.create(summary="Moved", start=at(20, 8), end=at(20, 9))
    store.create(summary="Fixed", start=at(20, 10), end=at(20, 11))

    store.update(moved, {"start": at(20, 12), "end": at(20, 13)})

    assert [event.summary for event in store.list()] == ["Fixed", "Moved"]
    assert _starts(store) == sorted(_starts(store))


def test_update_rejects_unknown_fields(store: EventStore) -> None:
    event_id = store.create(summary="A", start=at(20, 8), end=at(20, 9))

    with pytest.raises(ValueError):
        store.update(event_id, {"id": "evt_other"})


def test_delete_removes_exactly_one(store: EventStore) -> None:
    keep = store.create(summary="Keep", start=at(20, 8), end=at(20, 9))
    drop = store.create(summary="Drop", start=at(20, 10), end=at(20, 11))

    assert store.delete(drop) is True
    assert len(store) == 1
    assert drop not in store
    assert keep in store


def test_delete_missing_id_changes_nothing(store: EventStore) -> None:
    store.create(summary="Keep", start=at(20, 8), end=at(20, 9))

    assert store.delete("evt_missing") is False
    assert len(store) == 1


def test_sorted_after_mixed_operations(store: EventStore) -> None:
    ids = [store.create(summary=f"E{hour}", start=at(23, hour), end=at(23, hour + 1)) for hour in (15, 9, 12, 18)]
    store.update(ids[0], {"start": at(19, 7)})
    assert _starts(store) == sorted(_starts(store))
    store.delete(ids[2])
    assert _starts(store) == sorted(_starts(store))
    store.create(summary="Newest", start=at(1, 6), end=at(1, 7))
    assert _starts(store) == sorted(_starts(store))


def test_list_returns_a_copy(store: EventStore) -> None:
    store.create(summary="A", start=at(20, 8), end=at(20, 9))

    snapshot = store.list()
    snapshot.clear()

    assert len(store) == 1


def test_seed_demo_events(store: EventStore) -> None:
    now = at(18, 9)
    ids = seed_demo_events(store, tz=TZ, now=now)

    events = store.list()
    assert [event.id for event in events] == ids
    practice, lunch = events
    assert practice.summary == "Fodboldtræning (Anton)"
    assert practice.start == at(18, 17)
    assert practice.end == at(18, 18, 30)
    assert lunch.location == "Odense"
    assert lunch.start == now + timedelta(days=2)
