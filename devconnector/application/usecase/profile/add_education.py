"""Add education use case."""

from datetime import date
from uuid import uuid4

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.profile.view import (
    ProfileView,
    build_profile_view,
)
from devconnector.domain.model import Education
from devconnector.domain.repository import UserRepository
from devconnector.domain.service import ProfileService
from devconnector.domain.value import EducationId, Principal


class AddEducationRequest(BaseModel):
    """Add education request."""

    principal: Principal
    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class AddEducationUseCase(BaseUseCase):
    """Use case for prepending an education entry to the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> None:
        """Initialize add education use case.

        Args:
            profile_service: Profile domain service
            user_repository: User repository, for the owner's name and avatar
        """
        self.profile_service = profile_service
        self.user_repository = user_repository

    async def execute(self, request: AddEducationRequest) -> ProfileView:
        """Add an education entry with a fresh id.

        Raises:
            NoProfileError: If the caller has no profile
        """
        education = Education(
            id=EducationId(uuid4()),
            **request.model_dump(exclude={"principal"}),
        )
        profile = await self.profile_service.add_education(
            request.principal, education
        )
        return await build_profile_view(profile, self.user_repository)
