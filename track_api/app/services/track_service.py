"""
Service layer for tracks.

``TrackService`` owns the two rules the API guarantees about a track's
identity: the id and the creation date are generated here when a track
is created and are never taken from client input afterwards.  On
update the path id and the stored creation date always win over
whatever the payload carries.

Mutating operations hold a re‑entrant lock for their whole
read‑modify‑write sequence.  Concurrent requests against the same
service therefore apply one after another and the last writer wins;
an update racing a delete either sees the track (and re‑saves it
before the delete runs) or reports not found.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, List

from track_api.app.repositories.base import TrackRepository
from track_api.app.schemas.track import Track, TrackCreate, TrackUpdate
from track_api.app.services.results import Found, NotFound, TrackResult


logger = logging.getLogger(__name__)


def generate_track_id() -> str:
    """Return a random 128‑bit identifier as canonical UUID text."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TrackService:
    """Business operations on tracks backed by a ``TrackRepository``."""

    def __init__(
        self,
        repository: TrackRepository,
        id_factory: Callable[[], str] = generate_track_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.repository = repository
        self._id_factory = id_factory
        self._clock = clock
        self._lock = threading.RLock()

    def get_all_tracks(self) -> List[Track]:
        return self.repository.find_all()

    def get_track_by_id(self, track_id: str) -> TrackResult:
        track = self.repository.find_by_id(track_id)
        if track is None:
            logger.debug("Track %s not found", track_id)
            return NotFound(track_id)
        return Found(track)

    def create_track(self, data: TrackCreate) -> Track:
        """Store a new track with a generated id and the current time.

        ``data`` carries only the editable fields; the id and creation
        date are always produced here.
        """
        track = Track(
            id=self._id_factory(),
            creation_date=self._clock(),
            **data.model_dump(),
        )
        with self._lock:
            saved = self.repository.save(track)
        logger.info("Created track %s", saved.id)
        return saved

    def update_track(self, track_id: str, data: TrackUpdate) -> TrackResult:
        """Replace the editable fields of an existing track.

        Returns ``NotFound`` without touching the store if no track has
        ``track_id``.  Otherwise title, artist and duration are taken
        from ``data`` while the id and original creation date are kept.
        """
        with self._lock:
            existing = self.repository.find_by_id(track_id)
            if existing is None:
                logger.debug("Cannot update track %s: not found", track_id)
                return NotFound(track_id)
            updated = Track(
                id=track_id,
                creation_date=existing.creation_date,
                **data.model_dump(),
            )
            saved = self.repository.save(updated)
        logger.info("Updated track %s", track_id)
        return Found(saved)

    def delete_track(self, track_id: str) -> bool:
        """Delete a track by id.

        Returns ``True`` if a track was removed, ``False`` if none existed.
        """
        with self._lock:
            if not self.repository.exists_by_id(track_id):
                logger.debug("Cannot delete track %s: not found", track_id)
                return False
            self.repository.delete_by_id(track_id)
        logger.info("Deleted track %s", track_id)
        return True

    def track_exists(self, track_id: str) -> bool:
        return self.repository.exists_by_id(track_id)
