"""Delete account use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase, MessageResponse
from devconnector.domain.service import UserService
from devconnector.domain.value import Principal


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    principal: Principal


class DeleteAccountUseCase(BaseUseCase):
    """Use case for deleting the caller's profile, posts and user record."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete account use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> MessageResponse:
        await self.user_service.delete_account(request.principal)
        return MessageResponse(msg="User deleted")
