from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...api import ApiFunction, get_api_functions, serialize_event, serialize_message
from ...errors import TurnInProgressError
from ..context import ServiceContext

logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    text: str = Field(default="")


def _serialize_api_function(api_function: ApiFunction) -> dict:
    return {
        "name": api_function.name,
        "description": api_function.description,
        "category": api_function.category,
        "tags": list(api_function.tags),
        "parameters": api_function.parameter_schema,
    }


def create_app(context: Optional[ServiceContext] = None) -> FastAPI:
    ctx = context or ServiceContext()
    app = FastAPI(title=f"{ctx.settings.ui.app_name} API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.context = ctx

    @app.get("/api/functions")
    def list_api_functions() -> JSONResponse:
        return JSONResponse({"functions": [_serialize_api_function(func) for func in get_api_functions()]})

    @app.get("/api/events")
    def list_events() -> JSONResponse:
        return JSONResponse({"events": [serialize_event(event) for event in ctx.conversation.events]})

    @app.get("/api/messages")
    def list_messages() -> JSONResponse:
        return JSONResponse({"messages": [serialize_message(message) for message in ctx.conversation.messages]})

    # Sync handler: FastAPI runs it in the threadpool while the model is working.
    @app.post("/api/messages")
    def send_message(request: ChatRequest) -> JSONResponse:
        try:
            reply = ctx.conversation.submit(request.text)
        except TurnInProgressError as exc:
            logger.warning("Rejected message while a turn is in flight")
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return JSONResponse({"message": serialize_message(reply)})

    return app


def run_local_server(host: str = "127.0.0.1", port: int = 8000, *, context: Optional[ServiceContext] = None) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving API on http://%s:%d", host, port)
    asyncio.run(serve(create_app(context), config))
