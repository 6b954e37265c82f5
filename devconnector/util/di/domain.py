"""Domain layer DI providers."""

from dishka import Scope, provide

from devconnector.config import AuthSettings
from devconnector.domain.repository import (
    PostRepository,
    ProfileRepository,
    UserRepository,
)
from devconnector.domain.service import (
    GitHubClient,
    GitHubService,
    JWTService,
    PasswordHasher,
    PostService,
    ProfileService,
    UserService,
)
from devconnector.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        profile_repository: ProfileRepository,
        password_hasher: PasswordHasher,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            post_repository=post_repository,
            profile_repository=profile_repository,
            password_hasher=password_hasher,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_github_service(self, github_client: GitHubClient) -> GitHubService:
        """Provide GitHub domain service."""
        return GitHubService(github_client=github_client)
