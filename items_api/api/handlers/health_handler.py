"""
Health Check Handler

Liveness, version and health endpoints for monitoring and load balancers.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from items_api.api.dependencies.state import AppSettings, ItemStoreDep
from items_api.shared.core.logging import logger
from items_api.shared.schemas.common import HealthResponse, MessageResponse
from items_api.shared.schemas.version import VersionInfo
from items_api.shared.utils.version import build_version_info


router = APIRouter()


@router.get("/", response_model=MessageResponse)
async def root(settings: AppSettings):
    """
    Return API name with the current date and time.

    Used primarily as a health check to verify the API is up and responding.
    """
    timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
    timestamp = timestamp.replace("+00:00", "Z")
    logger.debug("Root", timestamp=timestamp)
    return MessageResponse(message=f"{settings.APP_NAME} {timestamp}")


@router.get("/version", response_model=VersionInfo)
async def version(settings: AppSettings):
    """Return version and build information."""
    return build_version_info(settings)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings, store: ItemStoreDep):
    """
    Health check with basic store information.

    Returns:
        HealthResponse with service status and item count
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        num_items=len(store),
        timestamp=datetime.now(timezone.utc),
    )
