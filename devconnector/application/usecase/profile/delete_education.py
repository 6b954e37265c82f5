"""Delete education use case."""

from uuid import UUID

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.profile.view import (
    ProfileView,
    build_profile_view,
)
from devconnector.domain.repository import UserRepository
from devconnector.domain.service import ProfileService
from devconnector.domain.value import EducationId, Principal


class DeleteEducationRequest(BaseModel):
    """Delete education request."""

    principal: Principal
    education_id: str


class DeleteEducationUseCase(BaseUseCase):
    """Use case for removing an education entry from the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> None:
        """Initialize delete education use case.

        Args:
            profile_service: Profile domain service
            user_repository: User repository, for the owner's name and avatar
        """
        self.profile_service = profile_service
        self.user_repository = user_repository

    async def execute(self, request: DeleteEducationRequest) -> ProfileView:
        """Remove an education entry.

        An id naming no entry, malformed ids included, leaves the profile as
        it was and still succeeds.

        Raises:
            NoProfileError: If the caller has no profile
        """
        try:
            education_id = EducationId(UUID(request.education_id))
        except ValueError:
            profile = await self.profile_service.get_mine(request.principal)
        else:
            profile = await self.profile_service.delete_education(
                request.principal, education_id
            )
        return await build_profile_view(profile, self.user_repository)
