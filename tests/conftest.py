"""
Shared fixtures for RevRoast tests
"""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from tests.fakes import FakeGateway


@pytest.fixture
def settings():
    return Settings(OPENROUTER_API_KEY="test-key", _env_file=None)


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def make_client(settings):
    def _make(gateway, **overrides):
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        return TestClient(create_app(app_settings, gateway=gateway))

    return _make


@pytest.fixture
def client(make_client, fake_gateway):
    return make_client(fake_gateway)
