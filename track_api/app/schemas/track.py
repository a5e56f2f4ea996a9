"""
Pydantic models for track data.

``TrackBase`` holds the client‑editable fields.  ``TrackCreate`` and
``TrackUpdate`` are the request bodies for creation and full
replacement; they deliberately have no ``id`` or ``creationDate``
fields, so any such values sent by a client are dropped during
validation.  ``Track`` is the stored record returned by the API.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class TrackBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Imagine"])
    artist: str = Field(..., min_length=1, examples=["John Lennon"])
    # Upper bound is the largest value a SQLite INTEGER column can hold.
    duration: int = Field(..., le=2**63 - 1, description="Length of the track in seconds", examples=[183])


class TrackCreate(TrackBase):
    """Schema for creating a track."""
    pass


class TrackUpdate(TrackBase):
    """Schema for replacing a track.

    All fields are required: an update overwrites every editable field
    rather than patching individual ones.
    """
    pass


class Track(TrackBase):
    """A persisted track as stored and returned by the API."""

    id: str
    creation_date: datetime = Field(..., alias="creationDate")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
