"""Application layer DI providers."""

from dishka import Scope, provide

from devconnector.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from devconnector.application.usecase.comment import (
    AddCommentUseCase,
    RemoveCommentUseCase,
)
from devconnector.application.usecase.like import LikePostUseCase, UnlikePostUseCase
from devconnector.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from devconnector.application.usecase.profile import (
    AddEducationUseCase,
    AddExperienceUseCase,
    DeleteEducationUseCase,
    DeleteExperienceUseCase,
    GetGitHubReposUseCase,
    GetMyProfileUseCase,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
    UpsertProfileUseCase,
)
from devconnector.application.usecase.user import (
    DeleteAccountUseCase,
    RegisterUserUseCase,
)
from devconnector.domain.repository import UserRepository
from devconnector.domain.service import (
    GitHubService,
    JWTService,
    PostService,
    ProfileService,
    UserService,
)
from devconnector.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_account_use_case(
        self, user_service: UserService
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(self, post_service: PostService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_post_use_case(self, post_service: PostService) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_use_case(
        self, post_service: PostService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(post_service=post_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_my_profile_use_case(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> GetMyProfileUseCase:
        """Provide get my profile use case."""
        return GetMyProfileUseCase(
            profile_service=profile_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_profile_by_user_use_case(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> GetProfileByUserUseCase:
        """Provide get profile by user use case."""
        return GetProfileByUserUseCase(
            profile_service=profile_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_list_profiles_use_case(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(
            profile_service=profile_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_upsert_profile_use_case(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> UpsertProfileUseCase:
        """Provide upsert profile use case."""
        return UpsertProfileUseCase(
            profile_service=profile_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_add_experience_use_case(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> AddExperienceUseCase:
        """Provide add experience use case."""
        return AddExperienceUseCase(
            profile_service=profile_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_experience_use_case(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> DeleteExperienceUseCase:
        """Provide delete experience use case."""
        return DeleteExperienceUseCase(
            profile_service=profile_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_add_education_use_case(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> AddEducationUseCase:
        """Provide add education use case."""
        return AddEducationUseCase(
            profile_service=profile_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_education_use_case(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> DeleteEducationUseCase:
        """Provide delete education use case."""
        return DeleteEducationUseCase(
            profile_service=profile_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_github_repos_use_case(
        self, github_service: GitHubService
    ) -> GetGitHubReposUseCase:
        """Provide get GitHub repos use case."""
        return GetGitHubReposUseCase(github_service=github_service)
