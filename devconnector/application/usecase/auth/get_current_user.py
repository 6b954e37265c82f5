"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.domain.model import User
from devconnector.domain.service import UserService
from devconnector.domain.value import Principal


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    principal: Principal


class GetCurrentUserResponse(BaseModel):
    """Public view of an account. Never carries the password hash."""

    id: str
    name: str
    email: str
    avatar: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "GetCurrentUserResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            avatar=user.avatar_url,
            created_at=user.created_at,
        )


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for loading the authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the user the token was issued to.

        Raises:
            NotFoundError: If the account was deleted after the token was issued
        """
        user = await self.user_service.get_by_id(request.principal.id)
        return GetCurrentUserResponse.from_user(user)
