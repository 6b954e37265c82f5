"""Mock GitHub providers for testing."""

from dishka import Scope, provide

from devconnector.adapter.github import MockGitHubClient
from devconnector.domain.service import GitHubClient
from devconnector.util.di.infrastructure.github import GitHubProvider


class MockGitHubProvider(GitHubProvider):
    """Mock GitHub provider returning canned repositories."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_github_client(self) -> GitHubClient:
        """Provide mock GitHub client."""
        return MockGitHubClient()
