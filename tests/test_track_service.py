"""Tests for the id and creation date rules enforced by TrackService."""

import threading
from datetime import timedelta

from tests.conftest import FIXED_NOW
from track_api.app.schemas.track import TrackCreate, TrackUpdate
from track_api.app.services.results import Found, NotFound
from track_api.app.services.track_service import TrackService, generate_track_id


def imagine() -> TrackCreate:
    return TrackCreate(title="Imagine", artist="John Lennon", duration=183)


def test_generate_track_id_is_random_uuid_text():
    first, second = generate_track_id(), generate_track_id()

    assert first != second
    assert len(first) == 36
    assert first.count("-") == 4


def test_create_assigns_id_and_creation_date(service, repository):
    created = service.create_track(imagine())

    assert created.id
    assert created.creation_date == FIXED_NOW
    assert created.title == "Imagine"
    assert created.artist == "John Lennon"
    assert created.duration == 183
    assert repository.find_by_id(created.id) == created


def test_create_discards_client_id_and_creation_date(service):
    payload = TrackCreate.model_validate(
        {
            "id": "client-chosen",
            "creationDate": "1999-01-01T00:00:00Z",
            "title": "Imagine",
            "artist": "John Lennon",
            "duration": 183,
        }
    )

    created = service.create_track(payload)

    assert created.id != "client-chosen"
    assert created.creation_date == FIXED_NOW


def test_create_uses_injected_id_factory(repository):
    ids = iter(["u1", "u2"])
    service = TrackService(repository, id_factory=lambda: next(ids), clock=lambda: FIXED_NOW)

    assert service.create_track(imagine()).id == "u1"
    assert service.create_track(imagine()).id == "u2"
    assert repository.count() == 2


def test_get_track_by_id(service):
    created = service.create_track(imagine())

    assert service.get_track_by_id(created.id) == Found(created)
    assert service.get_track_by_id("missing") == NotFound("missing")


def test_get_all_tracks(service):
    first = service.create_track(imagine())
    second = service.create_track(TrackCreate(title="Hotel California", artist="Eagles", duration=391))

    assert service.get_all_tracks() == [first, second]


def test_update_replaces_fields_and_keeps_identity(repository):
    times = iter([FIXED_NOW, FIXED_NOW + timedelta(days=1)])
    service = TrackService(repository, clock=lambda: next(times))
    created = service.create_track(imagine())

    result = service.update_track(
        created.id,
        TrackUpdate.model_validate(
            {
                "id": "other-id",
                "creationDate": "2030-01-01T00:00:00Z",
                "title": "Imagine (Remastered)",
                "artist": "John Lennon",
                "duration": 184,
            }
        ),
    )

    assert isinstance(result, Found)
    assert result.track.id == created.id
    assert result.track.creation_date == created.creation_date
    assert result.track.title == "Imagine (Remastered)"
    assert result.track.duration == 184
    assert repository.find_by_id(created.id) == result.track
    assert repository.exists_by_id("other-id") is False


def test_update_missing_track_leaves_store_unchanged(service, repository):
    created = service.create_track(imagine())

    result = service.update_track("missing", TrackUpdate(title="X", artist="Y", duration=1))

    assert result == NotFound("missing")
    assert repository.find_all() == [created]


def test_delete_track(service):
    created = service.create_track(imagine())

    assert service.delete_track(created.id) is True
    assert service.track_exists(created.id) is False
    assert isinstance(service.get_track_by_id(created.id), NotFound)


def test_delete_missing_track_returns_false(service, repository):
    created = service.create_track(imagine())

    assert service.delete_track("missing") is False
    assert repository.find_all() == [created]


def test_concurrent_creates_get_distinct_ids(service, repository):
    threads = [threading.Thread(target=service.create_track, args=(imagine(),)) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    tracks = repository.find_all()
    assert len(tracks) == 20
    assert len({track.id for track in tracks}) == 20
