"""
Main entrypoint for the Track API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn track_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .repositories import build_track_repository
from .services.seed import seed_sample_tracks
from .services.track_service import TrackService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to configure the application with.  Defaults to the
        module level ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The track store
        and service are created when the application starts.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the SQLite table when that backend is selected.
        repository = build_track_repository(settings)
        app.state.track_repository = repository
        app.state.track_service = TrackService(repository)
        if settings.seed_sample_data:
            seed_sample_tracks(repository)
        logging.getLogger(__name__).info("%s %s started", settings.project_name, settings.api_version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
