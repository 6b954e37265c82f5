"""Response shapes shared by the profile use cases."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from devconnector.domain.model import Education, Experience, Profile
from devconnector.domain.repository import UserRepository


class ProfileOwner(BaseModel):
    """Name and avatar of the user a profile belongs to."""

    id: str
    name: str
    avatar: str | None


class ExperienceView(BaseModel):
    """An experience entry; dates serialize under ``from`` and ``to``."""

    id: str
    title: str
    company: str
    location: str | None
    from_date: date = Field(serialization_alias="from")
    to_date: date | None = Field(serialization_alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_experience(cls, experience: Experience) -> "ExperienceView":
        return cls(
            id=str(experience.id),
            **experience.model_dump(exclude={"id"}),
        )


class EducationView(BaseModel):
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(serialization_alias="from")
    to_date: date | None = Field(serialization_alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_education(cls, education: Education) -> "EducationView":
        return cls(
            id=str(education.id),
            **education.model_dump(exclude={"id"}),
        )


class ProfileView(BaseModel):
    """A profile with its owner, experience and education.

    ``user`` is None when the owning account no longer exists.
    """

    id: str
    user: ProfileOwner | None
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    status: str
    github_username: str | None
    skills: list[str]
    social: dict[str, str]
    experience: list[ExperienceView]
    education: list[EducationView]
    created_at: datetime


async def build_profile_view(
    profile: Profile, user_repository: UserRepository
) -> ProfileView:
    """Render profile, joining in its owner's name and avatar."""
    user = await user_repository.find_by_id(profile.user_id)
    owner = (
        ProfileOwner(id=str(user.id), name=user.name, avatar=user.avatar_url)
        if user
        else None
    )
    return ProfileView(
        id=str(profile.id),
        user=owner,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        github_username=profile.github_username,
        skills=list(profile.skills),
        social=profile.social.model_dump(exclude_none=True),
        experience=[ExperienceView.from_experience(e) for e in profile.experience],
        education=[EducationView.from_education(e) for e in profile.education],
        created_at=profile.created_at,
    )
