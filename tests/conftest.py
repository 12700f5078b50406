# This project was developed with assistance from AI tools.
"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from casaready.core.config import Settings
from casaready.main import app


@pytest.fixture
def client():
    """Test client with the app lifespan running and overrides reset afterwards."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        CENSUS_API_KEY="test-key",
        CRM_API_URL="https://crm.test/api/leads",
        ZAPIER_WEBHOOK_URL="https://hooks.test/catch/123",
        REALTOR_NAME="Sully Ruiz",
        REALTOR_ADDRESS="100 Congress Ave",
    )
