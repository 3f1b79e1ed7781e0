"""
Shared Module

Domain code used by the API layer:
- Models: Item domain object
- Repositories: In-memory item store
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Utils: Constants, security, version info

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── models/         ← Domain objects
    ├── repositories/   ← Item store
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Utilities

Usage:
======
    from items_api.shared.models import Item
    from items_api.shared.repositories import ItemStore
    from items_api.shared.services import ItemService
    from items_api.shared.schemas import CreateItemRequest, ItemResponse
    from items_api.shared.core import logger, ItemsApiException
"""
