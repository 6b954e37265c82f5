"""Mock persistence providers for testing."""

from dishka import Scope, provide

from devconnector.domain.repository import (
    PostRepository,
    ProfileRepository,
    UserRepository,
)
from devconnector.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryProfileRepository,
    InMemoryUserRepository,
)
from devconnector.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data survives across the requests of one test client;
    every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()
