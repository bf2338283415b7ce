"""FastAPI application receiving webhook events."""

import json
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.responses import JSONResponse

from openbird_webhooks.api.schemas import AckResponse, ErrorResponse
from openbird_webhooks.core.exceptions import (
    APIException,
    BadRequestException,
    MethodNotAllowedException,
    NotFoundException,
)
from openbird_webhooks.core.logging import get_logger
from openbird_webhooks.webhooks.router import EventRouter, get_event_type

logger = get_logger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(router: EventRouter, path: str = "/") -> FastAPI:
    """Build the receiver application.

    Only ``POST`` requests on ``path`` are accepted. Each accepted event is
    acknowledged with ``{"ok": true}`` and dispatched once the response has
    been sent.

    Args:
        router: Router the events are dispatched to
        path: URL path to accept webhooks on

    Returns:
        ASGI application, usable on its own or mounted into another app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        logger.info("receiver_starting", path=path)
        yield
        await router.drain()
        logger.info("receiver_shutting_down")

    app = FastAPI(
        title="OpenBird Webhooks",
        description="Receive and handle OpenBird webhook events",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.router = router

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    @app.post(path, response_model=AckResponse)
    async def receive(request: Request, background_tasks: BackgroundTasks) -> Any:
        """Acknowledge a webhook event and dispatch it after responding."""
        body = await request.body()
        try:
            event = json.loads(body)
        except ValueError:
            logger.warning("invalid_json", path=request.url.path, size=len(body))
            raise BadRequestException("Invalid JSON")

        logger.info(
            "webhook_received",
            event_type=get_event_type(event),
            event_id=event.get("event_id") if isinstance(event, dict) else None,
        )

        background_tasks.add_task(router.dispatch, event)
        return AckResponse()

    @app.api_route("/{full_path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def fallback(request: Request) -> Any:
        if request.method != "POST":
            raise MethodNotAllowedException()
        raise NotFoundException()

    return app
