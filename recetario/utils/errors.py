"""
Recetario API - Custom Exception Classes.

Exception hierarchy for application error handling. Every exception carries
the HTTP status the request boundary answers with.
"""

from typing import Optional


class RecetarioException(Exception):
    """
    Base exception class for the Recetario application.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class AuthenticationError(RecetarioException):
    """
    Exception raised for authentication failures.

    Used when:
    - Missing or non-numeric user identity
    - Invalid or expired tokens
    - Unknown user
    - Wrong credentials
    """

    def __init__(
        self,
        message: str = "Not authorized",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=401,
            detail=detail
        )


class NotFoundError(RecetarioException):
    """
    Exception raised when a resource is not found.

    Used when:
    - Plan entry not found or owned by another user
    - Plan or recipe does not exist
    """

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=404,
            detail=detail
        )


class ValidationError(RecetarioException):
    """
    Exception raised for input validation failures.

    Used when:
    - Invalid input format
    - Missing required fields
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=400,
            detail=detail
        )


class ConflictError(RecetarioException):
    """
    Exception raised for resource conflicts.

    Used when:
    - Duplicate entry
    - Resource already exists
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=409,
            detail=detail
        )


class StoreError(RecetarioException):
    """
    Exception raised when the data store fails.

    The message is generic; the underlying error is only logged.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            detail=detail
        )
