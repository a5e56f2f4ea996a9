"""
Top‑level package for the Track API.

All functionality lives in submodules under ``app``, e.g.
``track_api.app.main``.
"""
