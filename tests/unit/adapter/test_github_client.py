"""Unit tests for the GitHub REST client."""

import httpx
import pytest

from devconnector.adapter.error import ProviderError
from devconnector.adapter.github import RealGitHubClient
from devconnector.domain.error import NotFoundError

REPOS = [
    {
        "name": "devconnector",
        "html_url": "https://github.com/ann/devconnector",
        "description": "Social network for developers",
        "language": "Python",
        "stargazers_count": 3,
        "watchers_count": 3,
        "forks_count": 1,
        "private": False,
    }
]


def _client(handler) -> RealGitHubClient:
    return RealGitHubClient(
        api_url="https://api.github.test/",
        repo_count=5,
        transport=httpx.MockTransport(handler),
    )


class TestListRepos:
    """Tests for RealGitHubClient.list_repos."""

    @pytest.mark.asyncio
    async def test_requests_newest_repositories(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=REPOS)

        repos = await _client(handler).list_repos("ann")

        assert [r.name for r in repos] == ["devconnector"]
        assert repos[0].stargazers_count == 3
        request = seen[0]
        assert request.url.path == "/users/ann/repos"
        assert request.url.params["per_page"] == "5"
        assert request.url.params["sort"] == "created"
        assert request.url.params["direction"] == "desc"

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        client = _client(lambda request: httpx.Response(404, json={}))

        with pytest.raises(NotFoundError):
            await client.list_repos("ghost")

    @pytest.mark.asyncio
    async def test_upstream_error(self):
        client = _client(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(ProviderError) as exc_info:
            await client.list_repos("ann")

        assert exc_info.value.provider == "github"

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(ProviderError):
            await _client(handler).list_repos("ann")
