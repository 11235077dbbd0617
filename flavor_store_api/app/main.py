"""
Main entrypoint for the Flavor Store API.

This module assembles the FastAPI application: it sets up logging,
creates the flavor store the handlers share, registers the not‑found
handler and mounts the API router under ``/api``.  ``app`` is built
at import time so it can be served directly, e.g.::

    uvicorn flavor_store_api.app.main:app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.errors import FlavorNotFoundError, flavor_not_found_handler
from .core.logging_config import setup_logging
from .services.flavor_service import FlavorStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[FlavorStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[FlavorStore]
        Store to serve.  A freshly seeded store is created when omitted,
        so every application instance starts from the same two flavors.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.flavor_store = store if store is not None else FlavorStore()

    app.add_exception_handler(FlavorNotFoundError, flavor_not_found_handler)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("%s running at %s", settings.project_name, settings.base_url)

    return app


app = create_app()
