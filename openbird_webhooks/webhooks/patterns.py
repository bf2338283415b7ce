"""Subscription pattern matching for event types."""

CATCH_ALL = "*"
WILDCARD_SUFFIX = ".*"


def matches(pattern: str, event_type: str) -> bool:
    """Check whether a subscription pattern selects an event type.

    Patterns come in three forms:

    * ``"*"`` matches every event type.
    * an exact type such as ``"im.message.receive_v1"`` matches only itself.
    * a prefix wildcard such as ``"im.message.*"`` matches any type that
      starts with ``"im.message."``. The bare prefix (``"im.message"``) is
      not matched.

    Matching is case-sensitive and does no normalisation.

    Args:
        pattern: Subscription pattern
        event_type: Concrete event type

    Returns:
        True if the pattern selects the event type
    """
    if pattern == CATCH_ALL:
        return True
    if pattern == event_type:
        return True
    if pattern.endswith(WILDCARD_SUFFIX):
        prefix = pattern[: -len(WILDCARD_SUFFIX)]
        return event_type.startswith(prefix + ".")
    return False
