"""Exceptions shared across the assistant."""

from __future__ import annotations


class ToolArgumentError(ValueError):
    """A tool was called with arguments that do not match its declaration."""


class LlmNotConfiguredError(RuntimeError):
    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"LLM provider is not configured. Missing: {', '.join(self.missing) or 'unknown'}")


class MalformedReplyError(RuntimeError):
    """The provider returned a reply the orchestrator cannot interpret."""


class TurnInProgressError(RuntimeError):
    """A new message was submitted while the previous turn is still running."""
