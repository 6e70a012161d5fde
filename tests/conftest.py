"""
Shared pytest configuration and fixtures for the test suite.

This module provides settings fixtures, a patched ``httpx.AsyncClient``
that records outbound calls, and test markers for all test categories.
"""

import pytest
from fakes import FakeAsyncClient

from places_gateway.settings import Settings


@pytest.fixture
def settings():
    """Settings with both provider credentials configured."""
    return Settings(
        _env_file=None,
        clerk_secret_key="sk_test_secret",
        google_places_api_key="places-test-key",
        clerk_api_url="https://clerk.test/v1",
        places_api_url="https://places.test/v1",
        upstream_timeout=5.0,
    )


@pytest.fixture
def unconfigured_settings():
    """Settings with no provider credentials."""
    return Settings(
        _env_file=None,
        clerk_secret_key=None,
        google_places_api_key=None,
        clerk_api_url="https://clerk.test/v1",
        places_api_url="https://places.test/v1",
    )


@pytest.fixture
def fake_http(monkeypatch):
    """Patch ``httpx.AsyncClient`` with a fake answering the given responses."""

    def install(*responses) -> FakeAsyncClient:
        fake = FakeAsyncClient(responses)
        monkeypatch.setattr("httpx.AsyncClient", fake)
        return fake

    return install


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, isolated)"
    )
    config.addinivalue_line("markers", "clerk: marks tests of the Clerk integration")
    config.addinivalue_line(
        "markers", "places: marks tests of the Google Places integration"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if "/unit/" in path:
            item.add_marker(pytest.mark.unit)
        if "/clerk/" in path:
            item.add_marker(pytest.mark.clerk)
        if "/places/" in path:
            item.add_marker(pytest.mark.places)
