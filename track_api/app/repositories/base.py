"""Abstract contract for track persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from track_api.app.schemas.track import Track


class TrackRepository(ABC):
    """Stores ``Track`` records keyed by their string id."""

    @abstractmethod
    def find_all(self) -> List[Track]:
        """Return every stored track."""

    @abstractmethod
    def find_by_id(self, track_id: str) -> Optional[Track]:
        """Return the track with ``track_id`` or ``None``."""

    @abstractmethod
    def save(self, track: Track) -> Track:
        """Insert or replace ``track`` by id and return the stored value."""

    @abstractmethod
    def exists_by_id(self, track_id: str) -> bool:
        """Return ``True`` if a track with ``track_id`` is stored."""

    @abstractmethod
    def delete_by_id(self, track_id: str) -> None:
        """Remove the track with ``track_id``.  Absent ids are ignored."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored tracks."""
