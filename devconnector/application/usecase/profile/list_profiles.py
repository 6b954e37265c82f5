"""List profiles use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.profile.view import (
    ProfileView,
    build_profile_view,
)
from devconnector.domain.repository import UserRepository
from devconnector.domain.service import ProfileService


class ListProfilesRequest(BaseModel):
    """List profiles request."""

    pass


class ListProfilesResponse(BaseModel):
    """Every profile, newest first."""

    profiles: list[ProfileView]


class ListProfilesUseCase(BaseUseCase):
    """Use case for listing every developer profile."""

    def __init__(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> None:
        """Initialize list profiles use case.

        Args:
            profile_service: Profile domain service
            user_repository: User repository, for owners' names and avatars
        """
        self.profile_service = profile_service
        self.user_repository = user_repository

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        profiles = await self.profile_service.list_profiles()
        return ListProfilesResponse(
            profiles=[
                await build_profile_view(p, self.user_repository) for p in profiles
            ]
        )
