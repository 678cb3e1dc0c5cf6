"""Application services shared by the HTTP, CLI and desktop front-ends."""

from __future__ import annotations

from .context import ServiceContext
from .conversation import Conversation

__all__ = ["Conversation", "ServiceContext"]
