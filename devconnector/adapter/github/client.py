"""GitHub REST API client for the repository listing proxy."""

import httpx
import logfire

from devconnector.adapter.error import ProviderError
from devconnector.domain.error import NotFoundError
from devconnector.domain.service.github_service import GitHubClient, GitHubRepo


class RealGitHubClient(GitHubClient):
    """Lists public repositories through the GitHub REST API."""

    def __init__(
        self,
        api_url: str,
        client_id: str | None = None,
        client_secret: str | None = None,
        timeout: float = 10.0,
        repo_count: int = 5,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize GitHub client.

        Args:
            api_url: Base URL of the GitHub REST API
            client_id: OAuth app client ID, optional
            client_secret: OAuth app client secret, optional
            timeout: Request timeout in seconds
            repo_count: Number of repositories to return
            transport: httpx transport override, used by tests
        """
        self.api_url = api_url.rstrip("/")
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout
        self.repo_count = repo_count
        self.transport = transport

    async def list_repos(self, username: str) -> list[GitHubRepo]:
        """List username's newest public repositories.

        Raises:
            NotFoundError: If GitHub has no such user
            ProviderError: If GitHub cannot be reached or answers with an error
        """
        params = {
            "per_page": str(self.repo_count),
            "sort": "created",
            "direction": "desc",
        }
        auth = None
        if self.client_id and self.client_secret:
            auth = (self.client_id, self.client_secret)

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(
                    f"{self.api_url}/users/{username}/repos",
                    params=params,
                    auth=auth,
                    headers={
                        "Accept": "application/vnd.github+json",
                        "User-Agent": "devconnector-api",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("GitHub repos HTTP error", username=username, error=str(e))
            raise ProviderError("github", f"HTTP error listing repositories: {e}")

        if response.status_code == 404:
            logfire.info("No GitHub profile", username=username)
            raise NotFoundError("GitHub profile", username)

        if response.status_code != 200:
            logfire.error(
                "GitHub repos request failed",
                username=username,
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                "github", f"Repository listing failed: {response.status_code}"
            )

        return [GitHubRepo.model_validate(item) for item in response.json()]


class MockGitHubClient(GitHubClient):
    """Mock GitHub client for testing.

    Returns deterministic repositories without network access. The user
    ``ghost`` does not exist.
    """

    MISSING_USER = "ghost"

    def __init__(self) -> None:
        pass

    async def list_repos(self, username: str) -> list[GitHubRepo]:
        if username == self.MISSING_USER:
            raise NotFoundError("GitHub profile", username)
        return [
            GitHubRepo(
                name=f"{username}-project-{i}",
                html_url=f"https://github.com/{username}/{username}-project-{i}",
                description="Mock repository",
                language="Python",
                stargazers_count=i,
                watchers_count=i,
                forks_count=0,
            )
            for i in range(2, 0, -1)
        ]
