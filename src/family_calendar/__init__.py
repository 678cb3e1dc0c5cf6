"""Chat assistant for a single family calendar."""

from __future__ import annotations

__version__ = "0.1.0"


def main() -> None:
    from .ui.app import run_gui

    run_gui()
