"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- State: get_app_settings(), get_item_store(), AppSettings, ItemStoreDep
- Authentication: require_api_key(), AdminKey
- Request guards: require_json_content_type()
- Services: get_item_service()

Usage:
======
    from items_api.api.dependencies import ItemStoreDep, require_api_key

    router = APIRouter(dependencies=[Depends(require_api_key)])

    @router.get("/count")
    async def count(store: ItemStoreDep):
        return {"num_items": len(store)}
"""

from items_api.api.dependencies.state import (
    get_app_settings,
    get_item_store,
    AppSettings,
    ItemStoreDep,
)
from items_api.api.dependencies.auth import (
    require_api_key,
    AdminKey,
)
from items_api.api.dependencies.content_type import require_json_content_type
from items_api.api.dependencies.services import get_item_service

__all__ = [
    # State
    "get_app_settings",
    "get_item_store",
    "AppSettings",
    "ItemStoreDep",
    # Authentication
    "require_api_key",
    "AdminKey",
    # Request guards
    "require_json_content_type",
    # Services
    "get_item_service",
]
