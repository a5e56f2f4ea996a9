"""
Error types and exception handlers.

Not found is the only business error the API models.  Routers raise
``TrackNotFoundError`` and the handler registered here turns it into
an empty‑bodied 404 response.  Everything else (malformed bodies,
database failures) is left to FastAPI's default handling.
"""

import logging

from fastapi import FastAPI, Request, Response, status


logger = logging.getLogger(__name__)


class TrackNotFoundError(Exception):
    """Raised when no track exists with the requested id."""

    def __init__(self, track_id: str) -> None:
        self.track_id = track_id
        super().__init__(f"Track {track_id} not found")


def register_error_handlers(app: FastAPI) -> None:
    """Register the exception handlers used by the track routes."""

    @app.exception_handler(TrackNotFoundError)
    async def track_not_found_handler(request: Request, exc: TrackNotFoundError) -> Response:
        logger.info("%s %s: track %s not found", request.method, request.url.path, exc.track_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
