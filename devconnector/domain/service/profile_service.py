"""Profile domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from devconnector.domain.error import NoProfileError, NotFoundError
from devconnector.domain.model import Education, Experience, Profile, ProfileFields
from devconnector.domain.repository import ProfileRepository
from devconnector.domain.value import EducationId, ExperienceId, Principal, UserId

from . import aggregate_mutator
from .base import Service


class ProfileService(Service):
    """Domain service for profiles.

    Every mutation is scoped to the profile belonging to the principal, so
    no separate ownership check is needed.
    """

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_mine(self, principal: Principal) -> Profile:
        """Get principal's own profile.

        Raises:
            NoProfileError: If principal has not created a profile yet
        """
        with logfire.span("profile_service.get_mine", user_id=str(principal.id)):
            profile = await self.profile_repository.find_by_user(principal.id)
            if not profile:
                logfire.info("No profile for user", user_id=str(principal.id))
                raise NoProfileError()
            return profile

    async def get_by_user(self, user_id: UserId) -> Profile:
        """Get the profile of any user.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("profile_service.get_by_user", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def list_profiles(self) -> list[Profile]:
        with logfire.span("profile_service.list_profiles"):
            profiles = await self.profile_repository.find_all()
            logfire.info("Profiles listed", count=len(profiles))
            return profiles

    async def upsert(self, principal: Principal, fields: ProfileFields) -> Profile:
        """Create principal's profile, or merge fields into the existing one.

        A second call never creates a second profile: a concurrent insert
        rejected by the store falls back to updating the winner's row.

        Raises:
            ValidationError: If status or skills are missing
        """
        with logfire.span("profile_service.upsert", user_id=str(principal.id)):
            candidate = aggregate_mutator.new_profile(principal, fields)

            existing = await self.profile_repository.find_by_user(principal.id)
            if existing:
                return await self._update(existing, fields)

            try:
                created = await self.profile_repository.save(candidate)
            except IntegrityError:
                logfire.warn(
                    "Concurrent profile creation, updating instead",
                    user_id=str(principal.id),
                )
                return await self._update(await self.get_mine(principal), fields)

            logfire.info(
                "Profile created",
                user_id=str(principal.id),
                profile_id=str(created.id),
            )
            return created

    async def _update(self, profile: Profile, fields: ProfileFields) -> Profile:
        changes = aggregate_mutator.profile_changes(profile, fields)
        if not changes:
            return profile
        updated = await self.profile_repository.update_fields(profile.user_id, changes)
        logfire.info(
            "Profile updated",
            user_id=str(profile.user_id),
            fields=sorted(changes),
        )
        return updated or profile

    async def add_experience(
        self, principal: Principal, experience: Experience
    ) -> Profile:
        """Prepend an experience entry to principal's profile.

        Raises:
            NoProfileError: If principal has no profile
        """
        with logfire.span(
            "profile_service.add_experience", user_id=str(principal.id)
        ):
            profile = await self.get_mine(principal)
            updated = aggregate_mutator.add_experience(profile, experience)
            await self.profile_repository.add_experience(
                profile.id, updated.experience[0]
            )
            logfire.info(
                "Experience added",
                profile_id=str(profile.id),
                experience_id=str(experience.id),
            )
            return await self.get_mine(principal)

    async def delete_experience(
        self, principal: Principal, experience_id: ExperienceId
    ) -> Profile:
        """Remove an experience entry. An unknown id changes nothing.

        Raises:
            NoProfileError: If principal has no profile
        """
        with logfire.span(
            "profile_service.delete_experience",
            user_id=str(principal.id),
            experience_id=str(experience_id),
        ):
            profile = await self.get_mine(principal)
            updated = aggregate_mutator.delete_experience(profile, experience_id)
            if updated == profile:
                logfire.info(
                    "Experience not found, nothing to delete",
                    profile_id=str(profile.id),
                    experience_id=str(experience_id),
                )
                return profile
            removed = await self.profile_repository.remove_experience(
                profile.id, experience_id
            )
            logfire.info(
                "Experience deleted",
                profile_id=str(profile.id),
                experience_id=str(experience_id),
                removed=removed,
            )
            return await self.get_mine(principal)

    async def add_education(self, principal: Principal, education: Education) -> Profile:
        """Prepend an education entry to principal's profile.

        Raises:
            NoProfileError: If principal has no profile
        """
        with logfire.span("profile_service.add_education", user_id=str(principal.id)):
            profile = await self.get_mine(principal)
            updated = aggregate_mutator.add_education(profile, education)
            await self.profile_repository.add_education(profile.id, updated.education[0])
            logfire.info(
                "Education added",
                profile_id=str(profile.id),
                education_id=str(education.id),
            )
            return await self.get_mine(principal)

    async def delete_education(
        self, principal: Principal, education_id: EducationId
    ) -> Profile:
        """Remove an education entry. An unknown id changes nothing.

        Raises:
            NoProfileError: If principal has no profile
        """
        with logfire.span(
            "profile_service.delete_education",
            user_id=str(principal.id),
            education_id=str(education_id),
        ):
            profile = await self.get_mine(principal)
            updated = aggregate_mutator.delete_education(profile, education_id)
            if updated == profile:
                logfire.info(
                    "Education not found, nothing to delete",
                    profile_id=str(profile.id),
                    education_id=str(education_id),
                )
                return profile
            removed = await self.profile_repository.remove_education(
                profile.id, education_id
            )
            logfire.info(
                "Education deleted",
                profile_id=str(profile.id),
                education_id=str(education_id),
                removed=removed,
            )
            return await self.get_mine(principal)
