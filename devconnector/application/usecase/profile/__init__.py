"""Profile use cases."""

from .add_education import AddEducationRequest, AddEducationUseCase
from .add_experience import AddExperienceRequest, AddExperienceUseCase
from .delete_education import DeleteEducationRequest, DeleteEducationUseCase
from .delete_experience import DeleteExperienceRequest, DeleteExperienceUseCase
from .get_github_repos import (
    GetGitHubReposRequest,
    GetGitHubReposResponse,
    GetGitHubReposUseCase,
)
from .get_my_profile import GetMyProfileRequest, GetMyProfileUseCase
from .get_profile_by_user import GetProfileByUserRequest, GetProfileByUserUseCase
from .list_profiles import (
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
)
from .upsert_profile import UpsertProfileRequest, UpsertProfileUseCase
from .view import EducationView, ExperienceView, ProfileOwner, ProfileView

__all__ = [
    "AddEducationRequest",
    "AddEducationUseCase",
    "AddExperienceRequest",
    "AddExperienceUseCase",
    "DeleteEducationRequest",
    "DeleteEducationUseCase",
    "DeleteExperienceRequest",
    "DeleteExperienceUseCase",
    "EducationView",
    "ExperienceView",
    "GetGitHubReposRequest",
    "GetGitHubReposResponse",
    "GetGitHubReposUseCase",
    "GetMyProfileRequest",
    "GetMyProfileUseCase",
    "GetProfileByUserRequest",
    "GetProfileByUserUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileOwner",
    "ProfileView",
    "UpsertProfileRequest",
    "UpsertProfileUseCase",
]
