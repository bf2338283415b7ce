"""Tests for subscription pattern matching."""

import pytest

from openbird_webhooks.webhooks.patterns import matches


@pytest.mark.parametrize(
    "event_type",
    ["im.message.receive_v1", "", "system.event.unknown", ".", "IM"],
)
def test_catch_all_matches_everything(event_type: str) -> None:
    """Test that "*" matches any type."""
    assert matches("*", event_type) is True


def test_exact_match() -> None:
    """Test exact pattern match."""
    assert matches("im.message.receive_v1", "im.message.receive_v1") is True
    assert matches("im.message.receive_v1", "im.message.receive_v2") is False


def test_exact_match_is_case_sensitive() -> None:
    """Test that matching does no case folding or trimming."""
    assert matches("im.message.receive_v1", "IM.MESSAGE.RECEIVE_V1") is False
    assert matches("im.message.receive_v1", " im.message.receive_v1") is False


@pytest.mark.parametrize(
    ("event_type", "expected"),
    [
        ("im.message.receive_v1", True),
        ("im.message.reaction.created_v1", True),
        ("im.message.", True),
        ("im.message", False),
        ("im.messages.receive_v1", False),
        ("im.chat.member_added", False),
        ("xim.message.receive_v1", False),
    ],
)
def test_prefix_wildcard(event_type: str, expected: bool) -> None:
    """Test prefix wildcard requires the prefix followed by a dot."""
    assert matches("im.message.*", event_type) is expected


def test_wildcard_does_not_match_bare_prefix() -> None:
    """Test that "im.*" does not match "im"."""
    assert matches("im.*", "im") is False
    assert matches("im.*", "im.chat") is True


def test_dot_star_pattern_matches_leading_dot() -> None:
    """Test degenerate ".*" pattern matches types starting with a dot."""
    assert matches(".*", ".hidden") is True
    assert matches(".*", "im.message") is False


def test_empty_pattern() -> None:
    """Test empty pattern matches only the empty type."""
    assert matches("", "") is True
    assert matches("", "im.message.receive_v1") is False


def test_wildcard_pattern_matches_itself() -> None:
    """Test a wildcard pattern equal to the type matches exactly."""
    assert matches("im.*", "im.*") is True


def test_star_inside_pattern_is_literal() -> None:
    """Test that only a trailing ".*" acts as a wildcard."""
    assert matches("im.*.receive_v1", "im.message.receive_v1") is False
    assert matches("im*", "im.message") is False
