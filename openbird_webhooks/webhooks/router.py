"""Event router: pattern registry and isolated handler dispatch."""

import asyncio
import inspect
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional, Union

from openbird_webhooks.core.config import get_settings
from openbird_webhooks.core.exceptions import DispatchException
from openbird_webhooks.core.logging import get_logger
from openbird_webhooks.webhooks.patterns import CATCH_ALL, matches

logger = get_logger(__name__)

Event = Any
Handler = Callable[[Event], Union[None, Awaitable[None]]]


def get_event_type(event: Event) -> str:
    """Read the type of an event, falling back to an empty string.

    Args:
        event: Parsed webhook payload

    Returns:
        Event type, or "" when the payload has no usable string type
    """
    if not isinstance(event, Mapping):
        return ""
    event_type = event.get("type")
    return event_type if isinstance(event_type, str) else ""


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class EventRouter:
    """Routes webhook events to handlers registered by pattern.

    Catch-all handlers (pattern ``"*"``) run first on every event, followed by
    the handlers of each matching pattern in the order the patterns were first
    registered. A failing handler is logged and never stops the others.
    """

    def __init__(
        self,
        on_event: Optional[Handler] = None,
        on_message: Optional[Handler] = None,
        message_pattern: Optional[str] = None,
    ) -> None:
        """Initialize router.

        Args:
            on_event: Shorthand for a catch-all handler
            on_message: Shorthand for a handler of instant-message events
            message_pattern: Pattern used for on_message (default from settings)
        """
        self._handlers: dict[str, list[Handler]] = {}
        self._catch_all: list[Handler] = []
        self._tasks: set[asyncio.Task] = set()

        if on_event is not None:
            self.register(CATCH_ALL, on_event)
        if on_message is not None:
            self.register(message_pattern or get_settings().message_pattern, on_message)

    def register(self, pattern: str, handler: Handler) -> "EventRouter":
        """Register a handler for an event type pattern.

        Args:
            pattern: Exact type, prefix wildcard ("im.message.*") or "*"
            handler: Sync or async callable receiving the event

        Returns:
            The router itself, for chaining
        """
        if not callable(handler):
            raise DispatchException(
                "Handler must be callable",
                details={"pattern": pattern, "handler": repr(handler)},
            )

        if pattern == CATCH_ALL:
            self._catch_all.append(handler)
        else:
            self._handlers.setdefault(pattern, []).append(handler)

        logger.debug("handler_registered", pattern=pattern, handler=_handler_name(handler))
        return self

    on = register

    @property
    def patterns(self) -> list[str]:
        """Registered patterns, excluding "*", in registration order."""
        return list(self._handlers)

    @property
    def catch_all(self) -> tuple[Handler, ...]:
        """Catch-all handlers in registration order."""
        return tuple(self._catch_all)

    def handlers_for(self, event_type: str) -> list[Handler]:
        """List the handlers a dispatch of the given type would invoke, in order."""
        selected = list(self._catch_all)
        for pattern, handlers in self._handlers.items():
            if matches(pattern, event_type):
                selected.extend(handlers)
        return selected

    async def dispatch(self, event: Event) -> None:
        """Invoke every handler that applies to the event.

        Returns once all handlers have finished. Handler errors are logged
        and swallowed.

        Args:
            event: Parsed webhook payload
        """
        event_type = get_event_type(event)

        # Registration may happen while a dispatch is suspended in a handler
        catch_all = list(self._catch_all)
        entries = [(pattern, list(handlers)) for pattern, handlers in self._handlers.items()]

        for handler in catch_all:
            await self._invoke(handler, event, event_type, CATCH_ALL)

        for pattern, handlers in entries:
            if not matches(pattern, event_type):
                continue
            for handler in handlers:
                await self._invoke(handler, event, event_type, pattern)

    async def _invoke(self, handler: Handler, event: Event, event_type: str, pattern: str) -> None:
        try:
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(
                "handler_error",
                event_type=event_type,
                pattern=pattern,
                handler=_handler_name(handler),
                error=str(e),
                exc_info=True,
            )

    def dispatch_nowait(self, event: Event) -> asyncio.Task:
        """Schedule a dispatch on the running loop without waiting for it.

        Args:
            event: Parsed webhook payload

        Returns:
            The scheduled task
        """
        task = asyncio.get_running_loop().create_task(self.dispatch(event))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @property
    def pending(self) -> int:
        """Number of scheduled dispatches that have not finished."""
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every scheduled dispatch to finish."""
        if not self._tasks:
            return
        logger.info("draining_dispatches", count=len(self._tasks))
        await asyncio.gather(*list(self._tasks), return_exceptions=True)
