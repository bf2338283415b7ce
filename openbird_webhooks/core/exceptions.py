"""Custom exceptions for the webhook receiver."""


class WebhookException(Exception):
    """Base exception for all webhook receiver errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize exception with message and optional details.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationException(WebhookException):
    """Configuration error."""

    pass


class ServerException(WebhookException):
    """HTTP server lifecycle error."""

    pass


class DispatchException(WebhookException):
    """Invalid use of the event router."""

    pass


class APIException(WebhookException):
    """Errors answered to the webhook sender."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict | None = None,
    ) -> None:
        """Initialize API exception.

        Args:
            message: Error message
            status_code: HTTP status code
            details: Additional error details
        """
        super().__init__(message, details)
        self.status_code = status_code


class BadRequestException(APIException):
    """Bad request."""

    def __init__(self, message: str = "Bad request", details: dict | None = None) -> None:
        """Initialize with 400 status code."""
        super().__init__(message, status_code=400, details=details)


class NotFoundException(APIException):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: dict | None = None) -> None:
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404, details=details)


class MethodNotAllowedException(APIException):
    """HTTP method not accepted."""

    def __init__(self, message: str = "Method not allowed", details: dict | None = None) -> None:
        """Initialize with 405 status code."""
        super().__init__(message, status_code=405, details=details)
