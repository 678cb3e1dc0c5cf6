from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..config import get_settings

_INITIALIZED = False


def configure_logging(*, level: Optional[str] = None) -> None:
    """Configure application-wide logging with console and dated file output."""

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings().logging
    resolved_level = getattr(logging, (level or settings.level).upper(), logging.INFO)
    settings.directory.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d")
    log_path = settings.directory / f"family-calendar-{timestamp}.log"

    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        logging.FileHandler(log_path, encoding="utf-8"),
    ]

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
    # The OpenAI client logs every request at INFO through httpx.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_path)
