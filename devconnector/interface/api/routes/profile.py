"""Profile routes."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from devconnector.application.usecase.base import MessageResponse
from devconnector.application.usecase.profile import (
    AddEducationRequest,
    AddEducationUseCase,
    AddExperienceRequest,
    AddExperienceUseCase,
    DeleteEducationRequest,
    DeleteEducationUseCase,
    DeleteExperienceRequest,
    DeleteExperienceUseCase,
    GetGitHubReposRequest,
    GetGitHubReposUseCase,
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetProfileByUserRequest,
    GetProfileByUserUseCase,
    ListProfilesRequest,
    ListProfilesUseCase,
    ProfileView,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from devconnector.application.usecase.user import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
)
from devconnector.domain.service import GitHubRepo
from devconnector.domain.value import Skills
from devconnector.interface.api.pipeline import Authenticated

router = APIRouter(prefix="/api/profile", tags=["profile"], route_class=DishkaRoute)


class ProfileAPIRequest(BaseModel):
    """API request for creating or updating a profile.

    ``skills`` may be sent as a comma-separated string.
    """

    model_config = ConfigDict(populate_by_name=True)

    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    github_username: str | None = Field(default=None, alias="githubusername")
    skills: Skills | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceAPIRequest(BaseModel):
    """API request for adding a work experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class EducationAPIRequest(BaseModel):
    """API request for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    fieldofstudy: str = Field(min_length=1)
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


@router.get("/me", response_model=ProfileView)
async def get_my_profile(
    context: Authenticated,
    get_my_profile_use_case: FromDishka[GetMyProfileUseCase],
) -> ProfileView:
    """Get the caller's own profile.

    Raises:
        NoProfileError: If the caller has not created one yet
    """
    return await get_my_profile_use_case.execute(
        GetMyProfileRequest(principal=context.principal)
    )


@router.post("", response_model=ProfileView)
async def upsert_profile(
    request: ProfileAPIRequest,
    context: Authenticated,
    upsert_profile_use_case: FromDishka[UpsertProfileUseCase],
) -> ProfileView:
    """Create the caller's profile, or update the one they have."""
    fields = request.model_dump(exclude={"skills"})
    return await upsert_profile_use_case.execute(
        UpsertProfileRequest(
            principal=context.principal,
            skills=request.skills.root if request.skills is not None else None,
            **fields,
        )
    )


@router.get("", response_model=list[ProfileView])
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
) -> list[ProfileView]:
    """List every profile. Public."""
    result = await list_profiles_use_case.execute(ListProfilesRequest())
    return result.profiles


@router.get("/user/{user_id}", response_model=ProfileView)
async def get_profile_by_user(
    user_id: str,
    get_profile_by_user_use_case: FromDishka[GetProfileByUserUseCase],
) -> ProfileView:
    """Get any user's profile. Public."""
    return await get_profile_by_user_use_case.execute(
        GetProfileByUserRequest(user_id=user_id)
    )


@router.delete("", response_model=MessageResponse)
async def delete_account(
    context: Authenticated,
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
) -> MessageResponse:
    """Delete the caller's profile, posts and account."""
    return await delete_account_use_case.execute(
        DeleteAccountRequest(principal=context.principal)
    )


@router.put("/experience", response_model=ProfileView)
async def add_experience(
    request: ExperienceAPIRequest,
    context: Authenticated,
    add_experience_use_case: FromDishka[AddExperienceUseCase],
) -> ProfileView:
    return await add_experience_use_case.execute(
        AddExperienceRequest(principal=context.principal, **request.model_dump())
    )


@router.delete("/experience/{experience_id}", response_model=ProfileView)
async def delete_experience(
    experience_id: str,
    context: Authenticated,
    delete_experience_use_case: FromDishka[DeleteExperienceUseCase],
) -> ProfileView:
    return await delete_experience_use_case.execute(
        DeleteExperienceRequest(
            principal=context.principal, experience_id=experience_id
        )
    )


@router.put("/education", response_model=ProfileView)
async def add_education(
    request: EducationAPIRequest,
    context: Authenticated,
    add_education_use_case: FromDishka[AddEducationUseCase],
) -> ProfileView:
    return await add_education_use_case.execute(
        AddEducationRequest(principal=context.principal, **request.model_dump())
    )


@router.delete("/education/{education_id}", response_model=ProfileView)
async def delete_education(
    education_id: str,
    context: Authenticated,
    delete_education_use_case: FromDishka[DeleteEducationUseCase],
) -> ProfileView:
    return await delete_education_use_case.execute(
        DeleteEducationRequest(principal=context.principal, education_id=education_id)
    )


@router.get("/github/{username}", response_model=list[GitHubRepo])
async def get_github_repos(
    username: str,
    get_github_repos_use_case: FromDishka[GetGitHubReposUseCase],
) -> list[GitHubRepo]:
    """List a GitHub user's newest repositories. Public."""
    result = await get_github_repos_use_case.execute(
        GetGitHubReposRequest(username=username)
    )
    return result.repos
