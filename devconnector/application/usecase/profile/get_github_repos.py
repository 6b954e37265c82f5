"""Get GitHub repositories use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.domain.service import GitHubRepo, GitHubService


class GetGitHubReposRequest(BaseModel):
    """Get GitHub repositories request."""

    username: str


class GetGitHubReposResponse(BaseModel):
    """Newest public repositories of a GitHub user."""

    repos: list[GitHubRepo]


class GetGitHubReposUseCase(BaseUseCase):
    """Use case for the repository listing shown on a profile."""

    def __init__(self, github_service: GitHubService) -> None:
        """Initialize get GitHub repos use case.

        Args:
            github_service: GitHub domain service
        """
        self.github_service = github_service

    async def execute(self, request: GetGitHubReposRequest) -> GetGitHubReposResponse:
        """List a GitHub user's repositories.

        Raises:
            NotFoundError: If GitHub knows no such user
            ProviderError: If GitHub cannot be reached
        """
        repos = await self.github_service.list_repos(request.username)
        return GetGitHubReposResponse(repos=repos)
