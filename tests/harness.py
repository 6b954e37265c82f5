"""Test harness for unit, integration and E2E tests.

Integration tests assume a PostgreSQL instance is reachable.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from devconnector.interface.api.app import create_app
from devconnector.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            post = await service.create_post(author, "Hello")
            assert post.text == "Hello"
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding a TestClient over a fresh app.

    Each test gets its own container, so stored data never leaks between
    tests while persisting across the requests of one test.

    Usage:
        client = create_client_fixture()

        def test_health(client):
            assert client.get("/health").status_code == 200
    """

    @pytest.fixture
    def _client():
        container = build_test_container(unmock=unmock or set())
        with TestClient(create_app(container)) as test_client:
            yield test_client

    return _client
