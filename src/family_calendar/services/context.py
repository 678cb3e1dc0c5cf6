from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from zoneinfo import ZoneInfo

from openai import OpenAI

from ..config import AppSettings, get_settings
from ..core import EventStore, seed_demo_events
from ..orchestrator import CalendarOrchestrator
from .conversation import Conversation


@dataclass(slots=True)
class ServiceContext:
    """Shares one store, orchestrator and transcript between the front-ends."""

    settings: AppSettings = field(default_factory=get_settings)
    client: Optional[OpenAI] = None
    store: EventStore = field(init=False)
    orchestrator: CalendarOrchestrator = field(init=False)
    conversation: Conversation = field(init=False)

    def __post_init__(self) -> None:
        tz = ZoneInfo(self.settings.assistant.timezone)
        self.store = EventStore(tz=tz)
        if self.settings.assistant.seed_events:
            seed_demo_events(self.store, tz=tz)
        self.orchestrator = CalendarOrchestrator(self.store, settings=self.settings, client=self.client)
        self.conversation = Conversation(self.orchestrator, calendar_name=self.settings.assistant.calendar_name)
