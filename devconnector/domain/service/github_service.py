"""Repository listing proxy for GitHub profiles."""

import logfire

from devconnector.domain.model.common import DomainModel

from .base import Service


class GitHubRepo(DomainModel):
    """Public repository summary shown on a developer profile."""

    name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0


class GitHubClient:
    """Client interface for the repository-listing provider."""

    async def list_repos(self, username: str) -> list[GitHubRepo]:
        """List a user's most recently created public repositories.

        Args:
            username: GitHub login

        Returns:
            Repositories, newest first

        Raises:
            NotFoundError: If the provider knows no such user
        """
        raise NotImplementedError


class GitHubService(Service):
    """Domain service fronting the repository-listing provider."""

    def __init__(self, github_client: GitHubClient) -> None:
        """Initialize GitHub service.

        Args:
            github_client: Repository-listing client
        """
        self.github_client = github_client

    async def list_repos(self, username: str) -> list[GitHubRepo]:
        with logfire.span("github_service.list_repos", username=username):
            repos = await self.github_client.list_repos(username)
            logfire.info("GitHub repos fetched", username=username, count=len(repos))
            return repos
