"""
Items API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           ITEMS API                                         │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Request Logging                                      │    │          │
│   │  │ Error Handlers                                       │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────┐                    │          │
│   │  │  Health  │ │  Items   │ │  Admin   │                    │          │
│   │  └──────────┘ └──────────┘ └──────────┘                    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                Dependencies (Injected)                       │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────┐                    │          │
│   │  │  Store   │ │ API Key  │ │ Services │                    │          │
│   │  └──────────┘ └──────────┘ └──────────┘                    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. create_application() builds the app with its own settings and item store
2. Application starts → lifespan startup logs version info and starts the
   periodic store log task when enabled
3. Application serves requests
4. Application stops → lifespan shutdown cancels the background task

Usage:
======
    # Run with the CLI
    items-api --port 3000

    # Run with uvicorn
    uvicorn items_api.api.main:app --host 0.0.0.0 --port 3000 --reload

    # Or programmatically
    from items_api.api.main import create_application
    app = create_application(Settings(API_KEY="secret"))
"""

import asyncio
from contextlib import asynccontextmanager, suppress
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from items_api.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from items_api.api.routes import register_routes
from items_api.config.settings import Settings, get_settings
from items_api.shared.core.logging import logger
from items_api.shared.repositories.item_store import ItemStore
from items_api.shared.services.store_monitor import log_store_stats_periodically
from items_api.shared.utils.version import build_version_info


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Log version information
    - Start periodic store statistics logging if enabled

    Shutdown:
    - Cancel the background task
    """
    settings: Settings = app.state.settings

    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting items API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV.value,
    )
    version_info = build_version_info(settings)
    if settings.is_local:
        logger.info(version_info.to_string_pretty())
    else:
        logger.info("Version information", **version_info.model_dump())

    monitor_task: Optional[asyncio.Task] = None
    if settings.PERIODIC_STORE_LOG_ENABLED:
        monitor_task = asyncio.create_task(
            log_store_stats_periodically(
                app.state.item_store,
                settings.PERIODIC_STORE_LOG_INTERVAL,
            )
        )

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down items API")

    if monitor_task is not None:
        monitor_task.cancel()
        with suppress(asyncio.CancelledError):
            await monitor_task

    logger.info("Items API shutdown complete")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use, defaults to the cached global settings

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Creates the item store the app owns
    3. Adds middleware (CORS, request logging)
    4. Sets up exception handlers
    5. Registers all routes
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="In-memory items API with an api-key gated admin surface",
        version=settings.APP_VERSION,
        # No documentation in production
        docs_url="/doc" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/api-docs/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    # Config and store are passed to routes through app.state
    app.state.settings = settings
    app.state.item_store = ItemStore(
        shard_count=settings.STORE_SHARD_COUNT,
        id_start=settings.ITEM_ID_START,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestLoggingMiddleware)

    # Added last so it is the outermost middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Application built from the cached global settings; served by the CLI and
# by `uvicorn items_api.api.main:app`
app = create_application()
