"""Event routing for incoming webhooks."""

from openbird_webhooks.webhooks.patterns import matches
from openbird_webhooks.webhooks.router import EventRouter, get_event_type

__all__ = ["EventRouter", "get_event_type", "matches"]
