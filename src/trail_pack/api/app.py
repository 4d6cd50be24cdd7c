"""FastAPI application factory.

The catalog is loaded once at startup and kept in `app.state.catalog`;
request handlers only read it. Tests inject a catalog directly:

```python
from fastapi.testclient import TestClient
from trail_pack.api import create_app

with TestClient(create_app(catalog=my_items)) as client:
    client.post("/api/selection", json={"activity": "Trek"})
```

Serve it with `trail-pack serve`, or `uvicorn.run(create_app())`.
Settings come from the environment, see `trail_pack.config`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trail_pack.catalog.loader import CatalogError, load_catalog
from trail_pack.config import Settings, get_settings
from trail_pack.models.equipment import EquipmentItem

logger = logging.getLogger(__name__)


def _startup_catalog(settings: Settings) -> list[EquipmentItem]:
    try:
        return load_catalog(settings.catalog_path)
    except CatalogError as e:
        logger.error(f"Catalog unavailable, serving an empty one: {e}")
        return []


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the catalog unless one was injected, then serve."""
    settings = get_settings()
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version} ({settings.environment})"
    )

    if app.state.catalog is None:
        app.state.catalog = _startup_catalog(settings)

    yield

    logger.info("Shutting down")


def create_app(catalog: list[EquipmentItem] | None = None) -> FastAPI:
    """Build the API application.

    Args:
        catalog: Normalized catalog to serve; loaded from `catalog_path`
            at startup when None

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Equipment checklist recommendations for outdoor trips",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.catalog = catalog

    # Read-only JSON API, no cookies
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    from trail_pack.api.routes import packing

    app.include_router(packing.router, prefix="/api", tags=["Packing"])

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Liveness check with the size of the loaded catalog."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "catalog_items": len(app.state.catalog or []),
        }

    return app
