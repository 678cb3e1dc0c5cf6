from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from .event_store import EventStore


def seed_demo_events(store: EventStore, *, tz: tzinfo, now: datetime | None = None) -> list[str]:
    """Populate ``store`` with the demonstration events shown on first launch."""

    reference = (now or datetime.now(tz)).astimezone(tz)
    practice_start = reference.replace(hour=17, minute=0, second=0, microsecond=0)
    lunch_start = reference + timedelta(days=2)

    return [
        store.create(
            summary="Fodboldtræning (Anton)",
            start=practice_start,
            end=practice_start.replace(hour=18, minute=30),
            description="Husk benskinner",
            location="Hallen",
        ),
        store.create(
            summary="Familie Frokost",
            start=lunch_start,
            end=lunch_start,
            description="Hos Mormor",
            location="Odense",
        ),
    ]
