"""Tests for the sample data loaded into an empty store."""

from datetime import timedelta

from tests.conftest import FIXED_NOW
from track_api.app.schemas.track import Track
from track_api.app.services.seed import SAMPLE_TRACKS, seed_sample_tracks


def test_seed_fills_empty_store(repository):
    inserted = seed_sample_tracks(repository, clock=lambda: FIXED_NOW)

    assert inserted == len(SAMPLE_TRACKS) == 5
    tracks = repository.find_all()
    assert [track.title for track in tracks] == [
        "Bohemian Rhapsody",
        "Hotel California",
        "Imagine",
        "Sweet Child O' Mine",
        "Stairway to Heaven",
    ]
    assert len({track.id for track in tracks}) == 5
    assert tracks[0].creation_date == FIXED_NOW - timedelta(days=5)
    assert tracks[-1].creation_date == FIXED_NOW - timedelta(hours=12)


def test_seed_skips_non_empty_store(repository):
    existing = Track(id="mine", title="Song", artist="Band", duration=200, creation_date=FIXED_NOW)
    repository.save(existing)

    assert seed_sample_tracks(repository) == 0
    assert repository.find_all() == [existing]
