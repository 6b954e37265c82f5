"""Login use case."""

import logfire
from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase, TokenResponse
from devconnector.domain.service import JWTService, UserService
from devconnector.domain.value import Principal


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for a bearer token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Execute login flow.

        Steps:
        1. Check credentials (via UserService)
        2. Issue a token for the user (via JWTService)

        Raises:
            InvalidCredentialsError: If e-mail or password is wrong
        """
        with logfire.span("login.execute"):
            user = await self.user_service.authenticate(
                request.email, request.password
            )
            token = self.jwt_service.issue(Principal(id=user.id))
            return TokenResponse(token=token)
