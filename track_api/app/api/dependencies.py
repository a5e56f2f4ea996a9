"""
Dependency providers for the track routes.

The track service is created once per application on startup and kept
on ``app.state``; ``get_track_service`` hands it to the endpoints.
Tests replace it through ``app.dependency_overrides``.
"""

from fastapi import Request

from track_api.app.services.track_service import TrackService


def get_track_service(request: Request) -> TrackService:
    return request.app.state.track_service
