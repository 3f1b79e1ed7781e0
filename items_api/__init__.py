"""
Items API

In-memory items REST API with an api-key gated admin surface.

Package Structure:
==================
    items_api/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, store, services, schemas)
    └── config/     ← Configuration

Running the Application:
========================
    # CLI
    items-api --port 3000

    # API Server
    uvicorn items_api.api.main:app --reload
"""
