"""GitHub adapter."""

from .client import MockGitHubClient, RealGitHubClient

__all__ = ["RealGitHubClient", "MockGitHubClient"]
