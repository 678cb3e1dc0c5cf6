"""In-memory calendar state."""

from __future__ import annotations

from .event_store import UPDATABLE_FIELDS, EventStore
from .seed import seed_demo_events

__all__ = ["EventStore", "UPDATABLE_FIELDS", "seed_demo_events"]
