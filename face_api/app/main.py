"""
Main entrypoint for the Face Store API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and configures
the app together with its own ``FaceStore``, which is then instantiated
at module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn face_api.app.main:app --port 8080

or through ``run.py`` at the project root.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.face_store import FaceStore


def create_app(store: Optional[FaceStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[FaceStore]
        Store the handlers operate on.  A fresh empty store is created
        when omitted, so every application owns its own data.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
    )
    app.state.face_store = store if store is not None else FaceStore()

    register_exception_handlers(app)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
