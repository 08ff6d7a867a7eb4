"""Shared fixtures for the reporting service and dashboard tests."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings


@pytest.fixture
def settings():
    return Settings(environment="test", version="2.3.4", frontend_url="http://localhost:3000")


@pytest.fixture
def app(settings):
    from main import create_app

    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)
