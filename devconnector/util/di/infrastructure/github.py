"""GitHub infrastructure providers."""

from dishka import Scope, provide

from devconnector.adapter.github import RealGitHubClient
from devconnector.config import Settings
from devconnector.domain.service import GitHubClient
from devconnector.util.di.base import ProviderBase


class GitHubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGitHubProvider(GitHubProvider):
    """Production GitHub provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_client(self, settings: Settings) -> GitHubClient:
        """Provide GitHub REST client.

        Returns:
            Client listing repositories through the GitHub API
        """
        return RealGitHubClient(
            api_url=settings.github.api_url,
            client_id=settings.github.client_id,
            client_secret=settings.github.client_secret,
            timeout=settings.github.timeout_seconds,
            repo_count=settings.github.repo_count,
        )
