"""
Content Type Dependency

Rejects write requests whose body is not declared as JSON.
FastAPI parses a body without a Content-Type header as JSON anyway, so
this check makes the requirement explicit and answers 415.
"""

from fastapi import Request

from items_api.shared.core.exceptions import UnsupportedMediaTypeError


def is_json_media_type(content_type: str) -> bool:
    """True for application/json and application/*+json, parameters ignored."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return True
    return media_type.startswith("application/") and media_type.endswith("+json")


async def require_json_content_type(request: Request) -> None:
    """
    Require a JSON Content-Type header.

    Raises:
        UnsupportedMediaTypeError: If the header is missing or not JSON
    """
    content_type = request.headers.get("content-type")
    if content_type is None or not is_json_media_type(content_type):
        raise UnsupportedMediaTypeError(
            details={"content_type": content_type},
        )
