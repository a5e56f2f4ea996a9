"""
Persistence backends for tracks.

``TrackRepository`` defines the contract the service layer depends on.
Two implementations are provided: ``InMemoryTrackRepository`` keeps
tracks in a process‑local map and ``SqliteTrackRepository`` stores
them in the ``tracks`` table.  ``build_track_repository`` picks one
based on the application settings.
"""

import logging

from track_api.app.core.config import Settings
from track_api.app.core.db import get_database_path, init_db
from track_api.app.repositories.base import TrackRepository
from track_api.app.repositories.memory import InMemoryTrackRepository
from track_api.app.repositories.sqlite import SqliteTrackRepository

__all__ = [
    "TrackRepository",
    "InMemoryTrackRepository",
    "SqliteTrackRepository",
    "build_track_repository",
]


def build_track_repository(settings: Settings) -> TrackRepository:
    """Create the repository selected by ``settings.track_store``.

    Raises ``ValueError`` for an unknown backend name so that a typo in
    the environment fails at startup rather than on the first request.
    """
    logger = logging.getLogger(__name__)
    if settings.track_store == "memory":
        logger.info("Using in-memory track store")
        return InMemoryTrackRepository()
    if settings.track_store == "sqlite":
        db_path = get_database_path(settings.database_url)
        init_db(db_path)
        logger.info("Using SQLite track store at %s", db_path)
        return SqliteTrackRepository(db_path)
    raise ValueError(f"Unknown track store: {settings.track_store!r}")
