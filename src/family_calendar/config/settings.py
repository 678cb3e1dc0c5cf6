from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "FamiliePrivatApp"
APP_AUTHOR = "FamiliePrivatApp"


@dataclass(frozen=True)
class LlmSettings:
    api_key: Optional[str]
    model: str
    base_url: Optional[str]
    api_version: Optional[str]
    organization: Optional[str]
    project: Optional[str]
    temperature: float
    timeout_seconds: float

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.model)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.api_key:
            missing.append("OPENAI_API_KEY")
        if not self.model:
            missing.append("OPENAI_MODEL")
        return missing


@dataclass(frozen=True)
class AssistantSettings:
    calendar_name: str
    timezone: str
    max_tool_rounds: int
    seed_events: bool
    record_runs: bool


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class UiSettings:
    app_name: str


@dataclass(frozen=True)
class AppSettings:
    llm: LlmSettings
    assistant: AssistantSettings
    logging: LoggingSettings
    ui: UiSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _flag_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> AppSettings:
    """Read settings from the environment without caching."""

    llm = LlmSettings(
        api_key=os.getenv("OPENAI_API_KEY"),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        base_url=os.getenv("OPENAI_BASE_URL"),
        api_version=os.getenv("OPENAI_API_VERSION"),
        organization=os.getenv("OPENAI_ORG"),
        project=os.getenv("OPENAI_PROJECT"),
        temperature=_float_from_env("OPENAI_TEMPERATURE", 0.2),
        timeout_seconds=_float_from_env("OPENAI_TIMEOUT_SECONDS", 60.0),
    )

    assistant = AssistantSettings(
        calendar_name=os.getenv("FAMILY_CALENDAR_NAME", APP_NAME),
        timezone=os.getenv("FAMILY_CALENDAR_TIMEZONE", "Europe/Copenhagen"),
        max_tool_rounds=_int_from_env("FAMILY_CALENDAR_MAX_TOOL_ROUNDS", 8),
        seed_events=_flag_from_env("FAMILY_CALENDAR_SEED_EVENTS", True),
        record_runs=_flag_from_env("FAMILY_CALENDAR_RECORD_RUNS", False),
    )

    log_settings = LoggingSettings(
        level=os.getenv("FAMILY_CALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("FAMILY_CALENDAR_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    ui = UiSettings(app_name=os.getenv("FAMILY_CALENDAR_APP_NAME", APP_NAME))

    return AppSettings(llm=llm, assistant=assistant, logging=log_settings, ui=ui)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return load_settings()
