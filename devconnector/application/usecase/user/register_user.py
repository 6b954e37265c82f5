"""Register user use case."""

import logfire
from pydantic import BaseModel, EmailStr, Field

from devconnector.application.usecase.base import BaseUseCase, TokenResponse
from devconnector.domain.service import JWTService, UserService
from devconnector.domain.value import Principal


class RegisterUserRequest(BaseModel):
    """Registration request."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6)


class RegisterUserUseCase(BaseUseCase):
    """Use case for creating an account and signing the user in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterUserRequest) -> TokenResponse:
        """Execute registration flow.

        Steps:
        1. Create the user with a gravatar avatar (via UserService)
        2. Issue a token for the new user (via JWTService)

        Raises:
            UserExistsError: If the e-mail is already registered
        """
        with logfire.span("register_user.execute"):
            user = await self.user_service.register(
                name=request.name,
                email=str(request.email),
                password=request.password,
            )
            token = self.jwt_service.issue(Principal(id=user.id))
            return TokenResponse(token=token)
