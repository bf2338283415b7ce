"""Tests for core exceptions module."""

from openbird_webhooks.core.exceptions import (
    APIException,
    BadRequestException,
    ConfigurationException,
    DispatchException,
    MethodNotAllowedException,
    NotFoundException,
    ServerException,
    WebhookException,
)


def test_base_exception() -> None:
    """Test base WebhookException."""
    exc = WebhookException("Test error", details={"key": "value"})

    assert str(exc) == "Test error"
    assert exc.message == "Test error"
    assert exc.details == {"key": "value"}


def test_base_exception_no_details() -> None:
    """Test base exception without details."""
    exc = WebhookException("Test error")

    assert exc.details == {}


def test_exception_hierarchy() -> None:
    """Test receiver exceptions derive from the base exception."""
    assert isinstance(ConfigurationException("Port is required"), WebhookException)
    assert isinstance(ServerException("Not listening"), WebhookException)
    assert isinstance(DispatchException("Handler must be callable"), WebhookException)
    assert isinstance(APIException("API error"), WebhookException)


def test_api_exception_with_status() -> None:
    """Test API exception with status code."""
    exc = APIException("API error", status_code=500, details={"error": "internal"})

    assert exc.message == "API error"
    assert exc.status_code == 500
    assert exc.details == {"error": "internal"}


def test_bad_request_exception() -> None:
    """Test BadRequestException defaults."""
    exc = BadRequestException()

    assert exc.status_code == 400
    assert exc.message == "Bad request"


def test_not_found_exception() -> None:
    """Test NotFoundException defaults."""
    exc = NotFoundException()

    assert exc.status_code == 404
    assert exc.message == "Not found"


def test_method_not_allowed_exception() -> None:
    """Test MethodNotAllowedException defaults."""
    exc = MethodNotAllowedException()

    assert exc.status_code == 405
    assert exc.message == "Method not allowed"
