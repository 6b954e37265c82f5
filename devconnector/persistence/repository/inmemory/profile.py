"""In-memory profile repository for testing."""

from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError

from devconnector.domain.model.profile import Education, Experience, Profile
from devconnector.domain.repository.profile import ProfileRepository
from devconnector.domain.value import EducationId, ExperienceId, ProfileId, UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    Profiles are keyed by owning user, mirroring the unique constraint.
    """

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    def _by_id(self, profile_id: ProfileId) -> Profile:
        return next(p for p in self._profiles.values() if p.id == profile_id)

    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by owning user."""
        return self._profiles.get(user_id)

    async def find_all(self) -> List[Profile]:
        """Find all profiles, newest first."""
        return sorted(
            self._profiles.values(), key=lambda p: p.created_at, reverse=True
        )

    async def save(self, profile: Profile) -> Profile:
        """Insert a profile.

        Raises:
            IntegrityError: If the user already has a profile
        """
        if profile.user_id in self._profiles:
            raise IntegrityError("Duplicate profile for user", None, Exception())
        self._profiles[profile.user_id] = profile
        return profile

    async def update_fields(
        self, user_id: UserId, fields: dict[str, Any]
    ) -> Optional[Profile]:
        """Set top-level fields on the user's profile."""
        profile = self._profiles.get(user_id)
        if profile is None:
            return None
        updated = profile.model_copy(update=fields)
        self._profiles[user_id] = updated
        return updated

    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the user's profile."""
        return self._profiles.pop(user_id, None) is not None

    async def add_experience(self, profile_id: ProfileId, experience: Experience) -> None:
        profile = self._by_id(profile_id)
        self._profiles[profile.user_id] = profile.model_copy(
            update={"experience": profile.experience.insert_front(experience)}
        )

    async def remove_experience(
        self, profile_id: ProfileId, experience_id: ExperienceId
    ) -> bool:
        profile = self._by_id(profile_id)
        remaining = profile.experience.remove_where(lambda e: e.id == experience_id)
        self._profiles[profile.user_id] = profile.model_copy(
            update={"experience": remaining}
        )
        return len(remaining) < len(profile.experience)

    async def add_education(self, profile_id: ProfileId, education: Education) -> None:
        profile = self._by_id(profile_id)
        self._profiles[profile.user_id] = profile.model_copy(
            update={"education": profile.education.insert_front(education)}
        )

    async def remove_education(
        self, profile_id: ProfileId, education_id: EducationId
    ) -> bool:
        profile = self._by_id(profile_id)
        remaining = profile.education.remove_where(lambda e: e.id == education_id)
        self._profiles[profile.user_id] = profile.model_copy(
            update={"education": remaining}
        )
        return len(remaining) < len(profile.education)
