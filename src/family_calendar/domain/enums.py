from __future__ import annotations

from enum import Enum


class ChatRole(str, Enum):
    USER = "user"
    MODEL = "model"
    SYSTEM = "system"
