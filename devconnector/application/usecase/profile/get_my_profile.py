"""Get my profile use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.profile.view import (
    ProfileView,
    build_profile_view,
)
from devconnector.domain.repository import UserRepository
from devconnector.domain.service import ProfileService
from devconnector.domain.value import Principal


class GetMyProfileRequest(BaseModel):
    """Get my profile request."""

    principal: Principal


class GetMyProfileUseCase(BaseUseCase):
    """Use case for loading the caller's own profile."""

    def __init__(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> None:
        """Initialize get my profile use case.

        Args:
            profile_service: Profile domain service
            user_repository: User repository, for the owner's name and avatar
        """
        self.profile_service = profile_service
        self.user_repository = user_repository

    async def execute(self, request: GetMyProfileRequest) -> ProfileView:
        """Load the caller's profile.

        Raises:
            NoProfileError: If the caller has not created a profile
        """
        profile = await self.profile_service.get_mine(request.principal)
        return await build_profile_view(profile, self.user_repository)
