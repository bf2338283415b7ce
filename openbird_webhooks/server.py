"""Webhook receiver server: router, ASGI app and uvicorn lifecycle."""

import asyncio
from typing import Optional

import uvicorn
from fastapi import FastAPI

from openbird_webhooks.api.app import create_app
from openbird_webhooks.core.config import Settings, get_settings
from openbird_webhooks.core.exceptions import ConfigurationException, ServerException
from openbird_webhooks.core.logging import get_logger, setup_logging
from openbird_webhooks.webhooks.router import EventRouter, Handler

logger = get_logger(__name__)

PORT_REQUIRED = "Port is required. Pass it to create_server(port=...) or .listen(port)."


class WebhookServer:
    """Receiver combining an event router with an HTTP endpoint.

    The ASGI application is available as ``app`` for embedding into an
    existing server; ``listen``/``close`` run it on uvicorn directly.
    """

    def __init__(
        self,
        router: EventRouter,
        port: Optional[int] = None,
        host: str = "0.0.0.0",
        path: str = "/",
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize server.

        Args:
            router: Router receiving dispatched events
            port: Default port for listen()
            host: Default host for listen()
            path: URL path to accept webhooks on
            settings: Application settings
        """
        self.settings = settings or get_settings()
        self.router = router
        self.port = port
        self.host = host
        self.path = path
        self.app: FastAPI = create_app(router, path=path)
        self._server: Optional[uvicorn.Server] = None
        self._serve_task: Optional[asyncio.Task] = None

    def on(self, pattern: str, handler: Handler) -> "WebhookServer":
        """Register a handler for an event type pattern.

        Args:
            pattern: Event type or pattern (e.g. "im.message.*", "*")
            handler: Sync or async callable receiving the event

        Returns:
            The server itself, for chaining
        """
        self.router.register(pattern, handler)
        return self

    @property
    def listening(self) -> bool:
        """Whether the uvicorn server is running."""
        return self._server is not None and self._server.started

    @property
    def address(self) -> tuple[str, int]:
        """Host and port the server is bound to."""
        if not self.listening:
            raise ServerException("Server is not listening")
        sockname = self._server.servers[0].sockets[0].getsockname()
        return sockname[0], sockname[1]

    def _resolve(self, port: Optional[int], host: Optional[str]) -> tuple[str, int]:
        listen_port = port if port is not None else self.port
        if listen_port is None:
            raise ConfigurationException(PORT_REQUIRED)
        return host or self.host, listen_port

    async def listen(self, port: Optional[int] = None, host: Optional[str] = None) -> "WebhookServer":
        """Start serving on the running event loop.

        Args:
            port: Port to bind, defaults to the configured port
            host: Host to bind, defaults to the configured host

        Returns:
            The server itself once it accepts connections
        """
        listen_host, listen_port = self._resolve(port, host)
        if self._server is not None:
            raise ServerException("Server is already listening")

        config = uvicorn.Config(
            self.app,
            host=listen_host,
            port=listen_port,
            log_level=self.settings.log_level.lower(),
        )
        self._server = uvicorn.Server(config)
        self._serve_task = asyncio.create_task(self._serve(self._server, listen_host, listen_port))

        while not self._server.started:
            if self._serve_task.done():
                server_task = self._serve_task
                self._server = None
                self._serve_task = None
                server_task.result()
                raise ServerException(
                    "Server stopped before accepting connections",
                    details={"host": listen_host, "port": listen_port},
                )
            await asyncio.sleep(0.01)

        bound_host, bound_port = self.address
        logger.info("listening", host=bound_host, port=bound_port, path=self.path)
        return self

    async def _serve(self, server: uvicorn.Server, host: str, port: int) -> None:
        # uvicorn exits the process when it cannot bind
        try:
            await server.serve()
        except SystemExit as e:
            raise ServerException(
                "Server failed to start",
                details={"host": host, "port": port, "exit_code": e.code},
            ) from e

    async def close(self) -> None:
        """Stop serving and wait for in-flight dispatches."""
        if self._server is None:
            return

        self._server.should_exit = True
        if self._serve_task is not None:
            await self._serve_task
        self._server = None
        self._serve_task = None
        logger.info("closed", path=self.path)

    def run(self, port: Optional[int] = None, host: Optional[str] = None) -> None:
        """Serve until interrupted (blocking).

        Args:
            port: Port to bind, defaults to the configured port
            host: Host to bind, defaults to the configured host
        """
        listen_host, listen_port = self._resolve(port, host)
        setup_logging(self.settings)
        logger.info("starting_server", host=listen_host, port=listen_port, path=self.path)
        uvicorn.run(
            self.app,
            host=listen_host,
            port=listen_port,
            log_level=self.settings.log_level.lower(),
        )


def create_server(
    port: Optional[int] = None,
    host: Optional[str] = None,
    path: Optional[str] = None,
    on_event: Optional[Handler] = None,
    on_message: Optional[Handler] = None,
    settings: Optional[Settings] = None,
) -> WebhookServer:
    """Create an OpenBird webhook receiver.

    Three usage modes are supported:

    1. Blocking: ``create_server(port=3000, on_message=handle).run()``
    2. Async: ``await create_server(on_message=handle).listen(3000)``
    3. Embedded: mount ``create_server(...).app`` into an existing ASGI app

    Args:
        port: Port to listen on, defaults to WEBHOOK_PORT
        host: Host to listen on, defaults to WEBHOOK_HOST
        path: URL path to accept webhooks on, defaults to WEBHOOK_PATH
        on_event: Handler called for every event
        on_message: Handler called for im.message.* events
        settings: Application settings

    Returns:
        Configured WebhookServer
    """
    settings = settings or get_settings()
    router = EventRouter(
        on_event=on_event,
        on_message=on_message,
        message_pattern=settings.message_pattern,
    )
    return WebhookServer(
        router,
        port=port if port is not None else settings.webhook_port,
        host=host or settings.webhook_host,
        path=path or settings.webhook_path,
        settings=settings,
    )
