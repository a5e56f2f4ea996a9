"""
Lookup results returned by the service layer.

Operations that may not find a track return ``Found`` or ``NotFound``
instead of ``None`` so callers have to handle both outcomes
explicitly.
"""

from dataclasses import dataclass
from typing import Union

from track_api.app.schemas.track import Track


@dataclass(frozen=True)
class Found:
    track: Track


@dataclass(frozen=True)
class NotFound:
    track_id: str


TrackResult = Union[Found, NotFound]
