"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    ItemsApiException (base)
       │
       ├── AuthenticationError (401)       ← Missing or invalid api-key header
       ├── NotFoundError (404)             ← Resource not found
       │      └── ItemNotFoundError
       ├── ValidationError (400)           ← Invalid input data
       ├── ConflictError (409)             ← Resource already exists
       │      ├── DuplicateItemError       ← Name already taken
       │      └── DuplicateItemIdError     ← Id already taken
       └── UnsupportedMediaTypeError (415) ← Body is not declared as JSON

Usage:
======
    from items_api.shared.core.exceptions import ItemNotFoundError, ValidationError

    # Raise with automatic status code
    raise ItemNotFoundError("esgrove")
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Item with name 'esgrove' not found"}}

    # Raise with additional details
    raise ValidationError("Item name must not be empty", details={"field": "name"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Item with name 'esgrove' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class ItemsApiException(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(ItemsApiException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - The api-key header is missing
    - The api-key header does not match the configured key
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(ItemsApiException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("Item", "esgrove", key="name")
        # Message: "Item with name 'esgrove' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        key: str = "id",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with {key} '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ItemNotFoundError(NotFoundError):
    """Item not found error."""

    def __init__(self, name: str) -> None:
        super().__init__(resource="Item", resource_id=name, key="name")


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409, 415)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(ItemsApiException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(ItemsApiException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateItemError(ConflictError):
    """An item with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Item already exists: {name}",
            details={"name": name},
        )


class DuplicateItemIdError(ConflictError):
    """Another item already uses the requested id."""

    def __init__(self, item_id: int) -> None:
        super().__init__(
            message=f"Item id already in use: {item_id}",
            details={"id": item_id},
        )


class UnsupportedMediaTypeError(ItemsApiException):
    """Request body was not sent as application/json (415)."""

    def __init__(
        self,
        message: str = "Expected request with `Content-Type: application/json`",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=415,
            error_code="UNSUPPORTED_MEDIA_TYPE",
            details=details,
        )
