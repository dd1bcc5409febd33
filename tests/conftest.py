"""Root conftest — shared fixtures for all ghwrapper tests."""

from __future__ import annotations

import pytest

from ghwrapper.http_client import close_github_client
from tests.helpers.factories import FakeResolver


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture(autouse=True)
def _close_http_client():
    """Never leak the shared HTTP client between tests."""
    yield
    close_github_client()
