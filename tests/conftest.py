"""Shared fixtures: settings, a seeded-free store and a scripted chat client."""

from __future__ import annotations

import copy
import json
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Iterable, List, Tuple, Union
from zoneinfo import ZoneInfo

import pytest

from family_calendar.config import AppSettings, AssistantSettings, LlmSettings, LoggingSettings
from family_calendar.config.settings import UiSettings
from family_calendar.core import EventStore

TZ = ZoneInfo("Europe/Copenhagen")

CallSpec = Tuple[str, str, Union[dict, str]]


def completion(content: str | None = None, tool_calls: Iterable[CallSpec] = ()) -> SimpleNamespace:
    """Build an object shaped like ``openai`` ChatCompletion."""

    calls = [
        SimpleNamespace(
            id=call_id,
            type="function",
            function=SimpleNamespace(
                name=name,
                arguments=arguments if isinstance(arguments, str) else json.dumps(arguments),
            ),
        )
        for call_id, name, arguments in tool_calls
    ]
    message = SimpleNamespace(role="assistant", content=content, tool_calls=calls or None)
    return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message, finish_reason="stop")])


class ScriptedClient:
    """Replays prepared completions and records every request it receives."""

    def __init__(self, replies: Iterable[Any] = ()) -> None:
        self.replies: List[Any] = list(replies)
        self.requests: List[dict] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def queue(self, *replies: Any) -> None:
        self.replies.extend(replies)

    def _create(self, **kwargs: Any) -> Any:
        self.requests.append(copy.deepcopy(kwargs))
        if not self.replies:
            raise AssertionError("Unexpected completion request")
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if callable(reply):
            return reply()
        return reply


def make_settings(tmp_path: Path, **assistant_overrides: Any) -> AppSettings:
    assistant = dict(
        calendar_name="FamiliePrivatApp",
        timezone="Europe/Copenhagen",
        max_tool_rounds=4,
        seed_events=False,
        record_runs=False,
    )
    assistant.update(assistant_overrides)
    return AppSettings(
        llm=LlmSettings(
            api_key="test-key",
            model="gpt-test",
            base_url=None,
            api_version=None,
            organization=None,
            project=None,
            temperature=0.2,
            timeout_seconds=5.0,
        ),
        assistant=AssistantSettings(**assistant),
        logging=LoggingSettings(level="DEBUG", directory=tmp_path / "logs"),
        ui=UiSettings(app_name="FamiliePrivatApp"),
    )


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return make_settings(tmp_path)


@pytest.fixture
def store() -> EventStore:
    return EventStore(tz=TZ)


@pytest.fixture
def client() -> ScriptedClient:
    return ScriptedClient()


def at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 10, day, hour, minute, tzinfo=TZ)
