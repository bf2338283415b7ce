"""Receive OpenBird webhook events and route them to registered handlers."""

from openbird_webhooks.server import WebhookServer, create_server
from openbird_webhooks.webhooks import EventRouter, matches

__version__ = "0.1.0"

__all__ = ["EventRouter", "WebhookServer", "create_server", "matches", "__version__"]
