from __future__ import annotations

import argparse
import logging

from .bootstrap import configure_logging
from .services import ServiceContext
from .services.http import run_local_server

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Family calendar assistant command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("gui", help="Launch the desktop GUI.")

    api_parser = subparsers.add_parser("api", help="Start the HTTP API for the chat and event list.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    subparsers.add_parser("chat", help="Chat with the assistant in the terminal.")

    return parser


def run_terminal_chat(context: ServiceContext) -> None:
    conversation = context.conversation
    for message in conversation.messages:
        print(message.text)
    while True:
        try:
            text = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if text.strip() in {"/quit", "/exit"}:
            return
        if text.strip() == "/events":
            for event in conversation.events:
                print(f"{event.id}  {event.start:%Y-%m-%d %H:%M}  {event.summary}")
            continue
        if not text.strip():
            continue
        reply = conversation.submit(text)
        print(("! " if reply.is_error else "") + reply.text)


def main() -> None:
    configure_logging()
    logger.info("Family calendar CLI starting")
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui()
    elif args.command == "api":
        run_local_server(host=args.host, port=args.port)
    elif args.command == "chat":
        run_terminal_chat(ServiceContext())
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
