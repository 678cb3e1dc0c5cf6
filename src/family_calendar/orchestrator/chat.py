from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import orjson
from openai import OpenAI

from ..api import get_api_function, get_api_functions
from ..config import AppSettings, get_settings
from ..core import EventStore
from ..errors import LlmNotConfiguredError, ToolArgumentError
from .prompts import DONE_FALLBACK, FAILURE_MESSAGE, ROUND_LIMIT_MESSAGE, build_system_instruction
from .session import ChatSession, ModelReply, ToolCall, ToolInvocation

logger = logging.getLogger(__name__)

UNKNOWN_FUNCTION = {"error": "Unknown function"}


@dataclass
class TurnResult:
    text: str
    is_error: bool = False
    invocations: List[ToolInvocation] = field(default_factory=list)
    rounds: int = 0


class CalendarOrchestrator:
    """Runs one user turn against the model, resolving tool calls on the store.

    The store is injected so tool handlers always see the live collection.
    Tool calls are executed one at a time in the order the model sent them;
    later calls may refer to ids created earlier in the same batch.
    """

    def __init__(
        self,
        store: EventStore,
        *,
        settings: Optional[AppSettings] = None,
        client: Optional[OpenAI] = None,
    ) -> None:
        self.store = store
        self.settings = settings or get_settings()
        self._client = client
        self._tools = [spec.as_tool() for spec in get_api_functions()]
        self._session: Optional[ChatSession] = None

    # ------------------------------------------------------------------ public API

    def start_chat(self) -> ChatSession:
        client = self._ensure_client()
        today = datetime.now(self.store.tz).date()
        self._session = ChatSession(
            client,
            model=self.settings.llm.model,
            system_instruction=build_system_instruction(self.settings.assistant.calendar_name, today),
            tools=self._tools,
            temperature=self.settings.llm.temperature,
        )
        return self._session

    def reset(self) -> None:
        self._session = None

    def send_message(self, text: str) -> str:
        return self.run_turn(text).text

    def run_turn(self, text: str) -> TurnResult:
        result = TurnResult(text="")
        session: Optional[ChatSession] = None
        mark = 0
        try:
            session = self._session or self.start_chat()
            mark = session.checkpoint()
            reply = session.send_user(text)
            reply = self._resolve_tool_calls(session, reply, result)
        except Exception:  # noqa: BLE001
            logger.exception("Turn failed after %d tool call(s)", len(result.invocations))
            if session is not None:
                session.rewind(mark)
            result.text = FAILURE_MESSAGE
            result.is_error = True
        else:
            if reply is None:
                logger.warning("Tool round limit (%d) reached; ending turn", self.settings.assistant.max_tool_rounds)
                session.rewind(mark)
                result.text = ROUND_LIMIT_MESSAGE
                result.is_error = True
            else:
                result.text = reply.text or DONE_FALLBACK

        self._record_run(text, result)
        return result

    def execute_tool(self, call: ToolCall) -> Dict[str, Any]:
        spec = get_api_function(call.name)
        if spec is None:
            logger.warning("Model requested unknown tool %s", call.name)
            return dict(UNKNOWN_FUNCTION)
        logger.info("Calling tool %s with %s", call.name, dict(call.arguments))
        try:
            return spec.invoke(self.store, call.arguments)
        except ToolArgumentError as exc:
            logger.warning("Rejected %s call: %s", call.name, exc)
            return {"error": str(exc)}

    # ------------------------------------------------------------------ helpers

    def _resolve_tool_calls(self, session: ChatSession, reply: ModelReply, result: TurnResult) -> Optional[ModelReply]:
        while reply.has_tool_calls:
            if result.rounds >= self.settings.assistant.max_tool_rounds:
                return None
            batch = [ToolInvocation(call=call, result=self.execute_tool(call)) for call in reply.tool_calls]
            result.invocations.extend(batch)
            result.rounds += 1
            reply = session.send_tool_results(batch)
        return reply

    def _ensure_client(self) -> OpenAI:
        if self._client is not None:
            return self._client
        llm = self.settings.llm
        if not llm.is_configured:
            raise LlmNotConfiguredError(llm.missing_env_vars)
        default_query = {}
        if llm.api_version:
            default_query["api-version"] = llm.api_version
        self._client = OpenAI(
            api_key=llm.api_key,
            base_url=llm.base_url,
            organization=llm.organization,
            project=llm.project,
            default_query=default_query or None,
            timeout=llm.timeout_seconds,
            max_retries=0,
        )
        return self._client

    def _record_run(self, user_message: str, result: TurnResult) -> None:
        if not self.settings.assistant.record_runs:
            return
        stamp = datetime.now(timezone.utc)
        entry = {
            "timestamp": stamp.isoformat(),
            "model": self.settings.llm.model,
            "user_message": user_message,
            "reply": result.text,
            "is_error": result.is_error,
            "rounds": result.rounds,
            "tool_calls": [invocation.to_dict() for invocation in result.invocations],
            "event_count": len(self.store),
        }
        try:
            runs_dir = Path(self.settings.logging.directory) / "agent_runs"
            runs_dir.mkdir(parents=True, exist_ok=True)
            filename = runs_dir / f"{stamp.strftime('%Y%m%dT%H%M%S%f')}.json"
            filename.write_bytes(orjson.dumps(entry, option=orjson.OPT_INDENT_2, default=str))
        except OSError:
            logger.warning("Could not write run record", exc_info=True)
