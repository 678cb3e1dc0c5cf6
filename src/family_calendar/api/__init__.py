"""Tool contract offered to the language model."""

from __future__ import annotations

from .registry import ApiFunction, call_api, get_api_function, get_api_functions, register_api
from .serializers import serialize_event, serialize_message

# Import tools so decorators run at module import time.
from . import tools  # noqa: F401

__all__ = [
    "ApiFunction",
    "call_api",
    "get_api_function",
    "get_api_functions",
    "register_api",
    "serialize_event",
    "serialize_message",
]
