"""Create or update profile use case."""

import logfire
from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.profile.view import (
    ProfileView,
    build_profile_view,
)
from devconnector.domain.model import ProfileFields
from devconnector.domain.repository import UserRepository
from devconnector.domain.service import ProfileService
from devconnector.domain.value import Principal, SocialLinks


class UpsertProfileRequest(BaseModel):
    """Create-or-update profile request.

    Empty values are treated as not provided.
    """

    principal: Principal
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    github_username: str | None = None
    skills: list[str] | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def to_fields(self) -> ProfileFields:
        return ProfileFields(
            company=self.company,
            website=self.website,
            location=self.location,
            bio=self.bio,
            status=self.status,
            github_username=self.github_username,
            skills=self.skills,
            social=SocialLinks(
                youtube=self.youtube,
                twitter=self.twitter,
                facebook=self.facebook,
                linkedin=self.linkedin,
                instagram=self.instagram,
            ),
        )


class UpsertProfileUseCase(BaseUseCase):
    """Use case for creating the caller's profile or merging into it."""

    def __init__(
        self, profile_service: ProfileService, user_repository: UserRepository
    ) -> None:
        """Initialize upsert profile use case.

        Args:
            profile_service: Profile domain service
            user_repository: User repository, for the owner's name and avatar
        """
        self.profile_service = profile_service
        self.user_repository = user_repository

    async def execute(self, request: UpsertProfileRequest) -> ProfileView:
        """Create or update the caller's profile.

        Raises:
            ValidationError: If status or skills are missing
        """
        with logfire.span("upsert_profile.execute", user_id=str(request.principal.id)):
            profile = await self.profile_service.upsert(
                request.principal, request.to_fields()
            )
            return await build_profile_view(profile, self.user_repository)
