"""Add experience use case."""

from datetime import date
from uuid import uuid4

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.profile.view import (
    ProfileView,
    build_profile_view,
)
from devconnector.domain.model import Experience
from devconnector.domain.repository import UserRepository
from devconnector.domain.service import ProfileService
from devconnector.domain.value import ExperienceId, Principal


class AddExperienceRequest(BaseModel):
    """Add experience request."""

    principal: Principal
    title: str
    company: str
    location: str | None = None
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class AddExperienceUseCase(BaseUseCase):
    """Use case for prepending a work experience entry to the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> None:
        """Initialize add experience use case.

        Args:
            profile_service: Profile domain service
            user_repository: User repository, for the owner's name and avatar
        """
        self.profile_service = profile_service
        self.user_repository = user_repository

    async def execute(self, request: AddExperienceRequest) -> ProfileView:
        """Add an experience entry with a fresh id.

        Raises:
            NoProfileError: If the caller has no profile
        """
        experience = Experience(
            id=ExperienceId(uuid4()),
            **request.model_dump(exclude={"principal"}),
        )
        profile = await self.profile_service.add_experience(
            request.principal, experience
        )
        return await build_profile_view(profile, self.user_repository)
