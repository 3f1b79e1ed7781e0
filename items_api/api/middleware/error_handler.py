"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Item with name 'esgrove' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. ItemsApiException subclasses → Use their status_code and to_dict()
2. RequestValidationError       → 400 for an empty body or a JSON syntax
                                  error, 422 (UNPROCESSABLE_ENTITY) for
                                  missing or mistyped fields
3. Starlette HTTPException      → Routing outcomes (404 unknown path,
                                  405 wrong method) in the same format
4. Other exceptions             → 500 with generic message (details hidden)

Usage:
======
    from items_api.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from items_api.shared.core.exceptions import ItemsApiException
from items_api.shared.core.logging import logger


# Error codes for framework-level HTTP errors
HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _is_malformed_body(error: dict[str, Any]) -> bool:
    """True for a JSON syntax error or a missing (empty) request body."""
    if error.get("type") == "json_invalid":
        return True
    return error.get("type") == "missing" and list(error.get("loc", [])) == ["body"]


def error_body(
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Build the standard error payload."""
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
        }
    }


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(ItemsApiException)
    async def items_api_exception_handler(
        request: Request,
        exc: ItemsApiException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from ItemsApiException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        A body that is empty or not valid JSON is a malformed request (400);
        a body or query that parses but does not match the schema is 422.
        """
        errors = jsonable_encoder(exc.errors())
        if any(_is_malformed_body(error) for error in errors):
            status_code = 400
            content = error_body(
                "BAD_REQUEST",
                "Malformed JSON in request body",
                {"errors": errors},
            )
        else:
            status_code = 422
            content = error_body(
                "UNPROCESSABLE_ENTITY",
                "Request validation failed",
                {"errors": errors},
            )

        logger.warning(
            "Validation error",
            status_code=status_code,
            errors=errors,
            path=request.url.path,
        )
        return JSONResponse(status_code=status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """
        Handle HTTP errors raised by routing.

        Keeps any headers the framework attached, such as Allow on 405.
        """
        logger.warning(
            "HTTP error",
            status_code=exc.status_code,
            method=request.method,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(
                HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
                str(exc.detail),
            ),
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
