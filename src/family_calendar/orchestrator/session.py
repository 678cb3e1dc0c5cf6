from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Sequence

import orjson

from ..errors import MalformedReplyError

if TYPE_CHECKING:
    from openai import OpenAI

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolCall:
    id: str
    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolInvocation:
    call: ToolCall
    result: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.call.id,
            "name": self.call.name,
            "arguments": dict(self.call.arguments),
            "result": self.result,
        }


@dataclass(frozen=True)
class ModelReply:
    text: str
    tool_calls: List[ToolCall] = field(default_factory=list)

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)


class ChatSession:
    """Ordered chat-completions conversation with tools attached."""

    def __init__(
        self,
        client: "OpenAI",
        *,
        model: str,
        system_instruction: str,
        tools: Sequence[Dict[str, Any]],
        temperature: float = 0.2,
    ) -> None:
        self._client = client
        self._model = model
        self._tools = list(tools)
        self._temperature = temperature
        self._messages: List[Dict[str, Any]] = [{"role": "system", "content": system_instruction}]

    def checkpoint(self) -> int:
        return len(self._messages)

    def rewind(self, mark: int) -> None:
        """Drop everything appended after ``mark`` so the history stays well formed."""

        del self._messages[max(mark, 1):]

    def send_user(self, text: str) -> ModelReply:
        self._messages.append({"role": "user", "content": text})
        return self._complete()

    def send_tool_results(self, invocations: Sequence[ToolInvocation]) -> ModelReply:
        for invocation in invocations:
            self._messages.append(
                {
                    "role": "tool",
                    "tool_call_id": invocation.call.id,
                    "content": orjson.dumps(invocation.result).decode("utf-8"),
                }
            )
        return self._complete()

    def _complete(self) -> ModelReply:
        completion = self._client.chat.completions.create(
            model=self._model,
            temperature=self._temperature,
            messages=list(self._messages),
            tools=self._tools,
            tool_choice="auto",
        )
        if not completion.choices:
            raise MalformedReplyError("Completion returned no choices.")
        message = completion.choices[0].message

        tool_calls: List[ToolCall] = []
        raw_calls: List[Dict[str, Any]] = []
        for call in message.tool_calls or []:
            tool_calls.append(ToolCall(id=call.id, name=call.function.name, arguments=self._parse_arguments(call)))
            raw_calls.append(
                {
                    "id": call.id,
                    "type": "function",
                    "function": {"name": call.function.name, "arguments": call.function.arguments or "{}"},
                }
            )

        entry: Dict[str, Any] = {"role": "assistant", "content": message.content}
        if raw_calls:
            entry["tool_calls"] = raw_calls
        self._messages.append(entry)
        logger.debug("Model replied with %d tool call(s)", len(tool_calls))
        return ModelReply(text=(message.content or "").strip(), tool_calls=tool_calls)

    @staticmethod
    def _parse_arguments(call: Any) -> Dict[str, Any]:
        raw = call.function.arguments
        if not raw:
            return {}
        try:
            parsed = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise MalformedReplyError(f"Arguments for {call.function.name} are not valid JSON") from exc
        if not isinstance(parsed, dict):
            raise MalformedReplyError(f"Arguments for {call.function.name} must be a JSON object")
        return parsed
