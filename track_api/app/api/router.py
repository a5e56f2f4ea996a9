"""
Top‑level API router.

Aggregates the domain routers under the ``/api`` prefix applied in
``main.create_app``.  When new domains are introduced, include their
routers here.
"""

from fastapi import APIRouter

from .endpoints import tracks

router = APIRouter()

router.include_router(tracks.router, prefix="/tracks", tags=["tracks"])
