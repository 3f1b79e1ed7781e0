"""
Application State Dependencies

FastAPI dependencies that expose the objects created once per application
(settings and the item store) to route handlers.

Both live on app.state, set by create_application(), so every app instance
(including each test's) has its own isolated store and configuration.

Usage:
======
    from items_api.api.dependencies.state import AppSettings, ItemStoreDep

    @router.get("/health")
    async def health(settings: AppSettings, store: ItemStoreDep):
        return {"service": settings.APP_NAME, "num_items": len(store)}
"""

from typing import Annotated

from fastapi import Depends, Request

from items_api.config.settings import Settings
from items_api.shared.repositories.item_store import ItemStore


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_item_store(request: Request) -> ItemStore:
    """The application's shared item store."""
    return request.app.state.item_store


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

AppSettings = Annotated[Settings, Depends(get_app_settings)]
ItemStoreDep = Annotated[ItemStore, Depends(get_item_store)]
