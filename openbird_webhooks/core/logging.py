"""Structured logging configuration using structlog.

Importing this module configures nothing: applications embedding the
receiver keep their own logging setup. ``setup_logging`` is called by the
standalone entry points (``WebhookServer.run`` and the CLI).
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from openbird_webhooks.core.config import Settings, get_settings


class AppContext:
    """Processor adding application context to log entries."""

    def __init__(self, settings: Settings) -> None:
        self.app = settings.app_name
        self.env = settings.app_env

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app"] = self.app
        event_dict["env"] = self.env
        return event_dict


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure structured logging for the application.

    Args:
        settings: Application settings (default from environment)
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        AppContext(settings),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.debug:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,  # type: ignore
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger, configured once setup_logging has run
    """
    return structlog.get_logger(name)
