"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from devconnector.domain.model.profile import Education, Experience, Profile
from devconnector.domain.value import EducationId, ExperienceId, ProfileId, UserId


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    The store enforces one profile per user: saving a second profile for
    the same user raises IntegrityError.
    """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile belonging to user_id.

        Returns:
            The profile with experience and education if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Profile]:
        """Find all profiles."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Insert a new profile.

        Raises:
            IntegrityError: If the user already has a profile
        """
        pass

    @abstractmethod
    async def update_fields(
        self, user_id: UserId, fields: dict[str, Any]
    ) -> Optional[Profile]:
        """Atomically set top-level fields on the user's profile.

        Args:
            user_id: Owner of the profile
            fields: Column name to new value; keys not present are untouched

        Returns:
            The updated profile, None if the user has no profile
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the user's profile with its sub-collections.

        Returns:
            True if a profile was deleted
        """
        pass

    @abstractmethod
    async def add_experience(self, profile_id: ProfileId, experience: Experience) -> None:
        """Atomically add an experience entry in front of the profile's list."""
        pass

    @abstractmethod
    async def remove_experience(
        self, profile_id: ProfileId, experience_id: ExperienceId
    ) -> bool:
        """Atomically remove an experience entry.

        Returns:
            True if an entry was removed
        """
        pass

    @abstractmethod
    async def add_education(self, profile_id: ProfileId, education: Education) -> None:
        """Atomically add an education entry in front of the profile's list."""
        pass

    @abstractmethod
    async def remove_education(
        self, profile_id: ProfileId, education_id: EducationId
    ) -> bool:
        """Atomically remove an education entry.

        Returns:
            True if an entry was removed
        """
        pass
