"""Shared fixtures for the GreenBit test suite."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from db.models import CommuteRecord, EmployeeRecord, FacilityInputs
from db.store import create_store
from main import create_app


@pytest.fixture
def facility_inputs():
    """Default Indian office configuration."""
    return FacilityInputs(
        electricity_kwh=15000,
        grid_factor=0.82,
        cloud_cpu_hours=4500,
        cloud_storage_gb=1800,
        server_count=6,
    )


@pytest.fixture
def make_employee():
    """Factory for roster entries with sensible defaults."""

    def _make(
        id=1,
        mode="metro",
        distance=12.5,
        hours=8,
        department="Engineering",
        name="Arjun Reddy",
    ):
        return EmployeeRecord(
            id=id,
            name=name,
            department=department,
            commute=CommuteRecord(mode=mode, distance=distance),
            hours_logged=hours,
            timestamp=datetime(2024, 1, 15, 9, 30),
        )

    return _make


@pytest.fixture
def test_settings():
    return Settings(MOCK_ROSTER_SIZE=5, MOCK_SEED=7, LOG_LEVEL="WARNING")


@pytest.fixture
def store(test_settings):
    return create_store(test_settings)


@pytest.fixture
def client(test_settings):
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client
