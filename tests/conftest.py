# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets environment defaults before the application is imported (settings are
# read once at import time) and provides fixtures shared by all test modules.
# =============================================================================

import os
from datetime import datetime, timezone

os.environ.setdefault("TRACK_STORE", "memory")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from track_api.app.api.dependencies import get_track_service
from track_api.app.core.config import Settings
from track_api.app.main import create_app
from track_api.app.repositories import InMemoryTrackRepository
from track_api.app.services.track_service import TrackService


FIXED_NOW = datetime(2024, 5, 17, 9, 30, tzinfo=timezone.utc)


def build_test_settings(**overrides) -> Settings:
    """Settings for an isolated app: in-memory store, no sample data."""
    values = {
        "project_name": "Track API (test)",
        "log_level": "WARNING",
        "track_store": "memory",
        "seed_sample_data": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def repository():
    return InMemoryTrackRepository()


@pytest.fixture
def service(repository):
    """Service over an in-memory store with a frozen clock."""
    return TrackService(repository, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(service):
    """TestClient whose routes use the ``service`` fixture."""
    app = create_app(build_test_settings())
    app.dependency_overrides[get_track_service] = lambda: service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
