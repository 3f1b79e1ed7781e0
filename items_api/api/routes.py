"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /                       → Liveness message
    /version                → Version and build information
    /health                 → Health check with item count
    /items, /item           → Public item endpoints
    /admin/clear_items      → Remove all items (api-key)
    /admin/remove/{name}    → Remove one item (api-key)

Usage:
======
    from items_api.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from items_api.api.handlers import (
    admin_handler,
    health_handler,
    item_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Public item endpoints
    app.include_router(
        item_handler.router,
        tags=["Items"],
    )

    # Put all admin routes under /admin
    app.include_router(
        admin_handler.router,
        prefix="/admin",
        tags=["Admin"],
    )
