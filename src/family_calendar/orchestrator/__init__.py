"""Tool-calling conversation loop between the chat model and the event store."""

from __future__ import annotations

from .chat import CalendarOrchestrator, TurnResult
from .session import ChatSession, ModelReply, ToolCall, ToolInvocation

__all__ = ["CalendarOrchestrator", "ChatSession", "ModelReply", "ToolCall", "ToolInvocation", "TurnResult"]
