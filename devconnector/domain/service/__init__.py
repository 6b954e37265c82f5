"""Domain services."""

from .base import Service
from .credentials import PasswordHasher
from .github_service import GitHubClient, GitHubRepo, GitHubService
from .jwt_service import JWTService
from .post_service import PostService
from .profile_service import ProfileService
from .user_service import UserService, gravatar_url

__all__ = [
    "GitHubClient",
    "GitHubRepo",
    "GitHubService",
    "JWTService",
    "PasswordHasher",
    "PostService",
    "ProfileService",
    "Service",
    "UserService",
    "gravatar_url",
]
