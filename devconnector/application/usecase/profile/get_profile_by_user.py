"""Get profile by user use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.profile.view import (
    ProfileView,
    build_profile_view,
)
from devconnector.domain.repository import UserRepository
from devconnector.domain.service import ProfileService
from devconnector.domain.value import UserId, parse_id


class GetProfileByUserRequest(BaseModel):
    """Get profile by user request."""

    user_id: str


class GetProfileByUserUseCase(BaseUseCase):
    """Use case for loading any user's public profile."""

    def __init__(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> None:
        """Initialize get profile by user use case.

        Args:
            profile_service: Profile domain service
            user_repository: User repository, for the owner's name and avatar
        """
        self.profile_service = profile_service
        self.user_repository = user_repository

    async def execute(self, request: GetProfileByUserRequest) -> ProfileView:
        """Load a profile by its owner's id.

        Raises:
            NotFoundError: If the id is malformed or the user has no profile
        """
        user_id = parse_id(request.user_id, UserId, "Profile")
        profile = await self.profile_service.get_by_user(user_id)
        return await build_profile_view(profile, self.user_repository)
