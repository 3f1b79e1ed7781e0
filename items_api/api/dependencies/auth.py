"""
Authentication Dependencies

FastAPI dependencies guarding the admin routes with a shared-secret header.

Request Pipeline:
=================
    Routing (path + method)   ← wrong verb is rejected here with 405
           │
           ▼
    require_api_key()         ← missing or wrong api-key header → 401
           │
           ▼
    Admin handler             ← only runs with a valid key

Because routing happens first, a GET against a DELETE-only admin path
answers 405 whether or not a valid key is sent.

Type Aliases:
=============
    AdminKey - The verified api key (use when the handler wants it)

Usage:
======
    from items_api.api.dependencies.auth import require_api_key

    # Guard a whole router
    router = APIRouter(dependencies=[Depends(require_api_key)])

    # Or a single route
    @router.delete("/thing")
    async def delete_thing(_api_key: AdminKey):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from items_api.api.dependencies.state import get_app_settings
from items_api.config.settings import Settings
from items_api.shared.core.exceptions import AuthenticationError
from items_api.shared.core.logging import logger
from items_api.shared.utils.constants import API_KEY_HEADER
from items_api.shared.utils.security import SecurityUtils


# Security scheme for the admin shared secret, also documented in OpenAPI
api_key_scheme = APIKeyHeader(
    name=API_KEY_HEADER,
    auto_error=False,
    description="Shared secret for admin routes",
)


async def require_api_key(
    request: Request,
    api_key: Annotated[Optional[str], Depends(api_key_scheme)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str:
    """
    Check the api-key header against the configured secret.

    Args:
        request: Incoming request, used for log context
        api_key: Header value, None when missing or empty
        settings: Application settings holding the expected key

    Returns:
        The verified api key

    Raises:
        AuthenticationError: If the header is missing or does not match
    """
    if api_key is None:
        logger.warning(
            "Missing API key header",
            method=request.method,
            path=request.url.path,
        )
        raise AuthenticationError(f"Missing {API_KEY_HEADER} header")

    if not SecurityUtils.verify_api_key(api_key, settings.API_KEY):
        logger.warning(
            "Invalid API key",
            api_key=SecurityUtils.mask_api_key(api_key),
            method=request.method,
            path=request.url.path,
        )
        raise AuthenticationError("Invalid API key")

    return api_key


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

AdminKey = Annotated[str, Depends(require_api_key)]
