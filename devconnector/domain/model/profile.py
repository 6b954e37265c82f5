"""Profile aggregate root.

Exactly one profile exists per user. Experience and education entries
are prepend-ordered and can only be added or removed, never edited.
"""

from datetime import date, datetime

from pydantic import Field

from devconnector.domain.model.common import DomainModel
from devconnector.domain.value import (
    EducationId,
    ExperienceId,
    OrderedItems,
    ProfileId,
    SocialLinks,
    UserId,
)


class Experience(DomainModel):
    """Work experience entry."""

    id: ExperienceId
    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str | None = None
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class Education(DomainModel):
    """Education entry."""

    id: EducationId
    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    fieldofstudy: str = Field(min_length=1)
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class Profile(DomainModel):
    """Profile aggregate root."""

    id: ProfileId
    user_id: UserId
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str = Field(min_length=1)
    github_username: str | None = None
    skills: list[str] = Field(min_length=1)
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: OrderedItems[Experience] = Field(
        default_factory=OrderedItems[Experience]
    )
    education: OrderedItems[Education] = Field(default_factory=OrderedItems[Education])
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def owner_id(self) -> UserId:
        return self.user_id


class ProfileFields(DomainModel):
    """Top-level profile fields supplied by a create-or-update request.

    Empty values mean "not provided" and never overwrite stored data.
    """

    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    github_username: str | None = None
    skills: list[str] | None = None
    social: SocialLinks = Field(default_factory=SocialLinks)

    def provided(self) -> dict:
        """Return the non-empty top-level fields, social excluded."""
        data = self.model_dump(exclude={"social"})
        return {key: value for key, value in data.items() if value}
