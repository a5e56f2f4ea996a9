"""
Track endpoints.

These routes expose a CRUD API for tracks under ``/api/tracks``.
Updates are full replacements: every editable field must be sent and
there is no PATCH.  Requests for an unknown id raise
``TrackNotFoundError``, which the application turns into an empty 404.
The collection answers both with and without a trailing slash.

The handlers are plain functions so FastAPI runs them in its thread
pool; the store calls they make are blocking.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from track_api.app.api.dependencies import get_track_service
from track_api.app.core.errors import TrackNotFoundError
from track_api.app.schemas.track import Track, TrackCreate, TrackUpdate
from track_api.app.services.results import NotFound
from track_api.app.services.track_service import TrackService

router = APIRouter()


@router.get("", response_model=List[Track])
@router.get("/", response_model=List[Track], include_in_schema=False)
def list_tracks(service: TrackService = Depends(get_track_service)) -> List[Track]:
    """Return all tracks."""
    return service.get_all_tracks()


@router.get("/{track_id}", response_model=Track)
def get_track(track_id: str, service: TrackService = Depends(get_track_service)) -> Track:
    """Retrieve a single track by id.  Returns HTTP 404 if it does not exist."""
    result = service.get_track_by_id(track_id)
    if isinstance(result, NotFound):
        raise TrackNotFoundError(track_id)
    return result.track


@router.post("", response_model=Track, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=Track, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_track(track_in: TrackCreate, service: TrackService = Depends(get_track_service)) -> Track:
    """Create a track.

    The id and ``creationDate`` of the new track are assigned by the
    server; values sent for them in the body are ignored.
    """
    return service.create_track(track_in)


@router.put("/{track_id}", response_model=Track)
def update_track(
    track_id: str,
    track_in: TrackUpdate,
    service: TrackService = Depends(get_track_service),
) -> Track:
    """Replace an existing track, keeping its id and ``creationDate``."""
    result = service.update_track(track_id, track_in)
    if isinstance(result, NotFound):
        raise TrackNotFoundError(track_id)
    return result.track


@router.delete("/{track_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_track(track_id: str, service: TrackService = Depends(get_track_service)) -> Response:
    """Delete a track by id."""
    if not service.delete_track(track_id):
        raise TrackNotFoundError(track_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
