"""In‑memory track store."""

import threading
from typing import Dict, List, Optional

from track_api.app.repositories.base import TrackRepository
from track_api.app.schemas.track import Track


class InMemoryTrackRepository(TrackRepository):
    """Keeps tracks in a dict guarded by a lock.

    Copies are stored and returned so that callers mutating a ``Track``
    instance never change persisted state behind the store's back.
    Tracks are listed in the order they were first saved.
    """

    def __init__(self) -> None:
        self._tracks: Dict[str, Track] = {}
        self._lock = threading.Lock()

    def find_all(self) -> List[Track]:
        with self._lock:
            return [track.model_copy() for track in self._tracks.values()]

    def find_by_id(self, track_id: str) -> Optional[Track]:
        with self._lock:
            track = self._tracks.get(track_id)
            return track.model_copy() if track is not None else None

    def save(self, track: Track) -> Track:
        stored = track.model_copy()
        with self._lock:
            self._tracks[stored.id] = stored
        return stored.model_copy()

    def exists_by_id(self, track_id: str) -> bool:
        with self._lock:
            return track_id in self._tracks

    def delete_by_id(self, track_id: str) -> None:
        with self._lock:
            self._tracks.pop(track_id, None)

    def count(self) -> int:
        with self._lock:
            return len(self._tracks)
