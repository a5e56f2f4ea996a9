"""
Sample data for a fresh store.

``seed_sample_tracks`` fills an empty repository with a few well known
songs so that a newly started service has something to list.  It is
called on startup when ``SEED_SAMPLE_DATA`` is enabled and leaves a
store that already holds tracks untouched.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, List, Tuple

from track_api.app.repositories.base import TrackRepository
from track_api.app.schemas.track import Track
from track_api.app.services.track_service import generate_track_id, utc_now


logger = logging.getLogger(__name__)

# (title, artist, duration in seconds, age at seeding time)
SAMPLE_TRACKS: List[Tuple[str, str, int, timedelta]] = [
    ("Bohemian Rhapsody", "Queen", 355, timedelta(days=5)),
    ("Hotel California", "Eagles", 391, timedelta(days=3)),
    ("Imagine", "John Lennon", 183, timedelta(days=2)),
    ("Sweet Child O' Mine", "Guns N' Roses", 356, timedelta(days=1)),
    ("Stairway to Heaven", "Led Zeppelin", 482, timedelta(hours=12)),
]


def seed_sample_tracks(
    repository: TrackRepository,
    clock: Callable[[], datetime] = utc_now,
) -> int:
    """Insert ``SAMPLE_TRACKS`` if the repository is empty.

    Returns the number of tracks inserted.
    """
    existing = repository.count()
    if existing:
        logger.info("Track store already contains %s tracks, skipping sample data", existing)
        return 0

    now = clock()
    for title, artist, duration, age in SAMPLE_TRACKS:
        repository.save(
            Track(
                id=generate_track_id(),
                title=title,
                artist=artist,
                duration=duration,
                creation_date=now - age,
            )
        )
    logger.info("Initialised track store with %s sample tracks", len(SAMPLE_TRACKS))
    return len(SAMPLE_TRACKS)
