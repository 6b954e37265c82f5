"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, EmailStr, Field

from devconnector.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from devconnector.application.usecase.base import TokenResponse
from devconnector.interface.api.pipeline import Authenticated

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for exchanging credentials for a token."""

    email: EmailStr
    password: str = Field(min_length=1)


@router.get("", response_model=GetCurrentUserResponse)
async def get_current_user(
    context: Authenticated,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetCurrentUserResponse:
    """Get the authenticated user.

    Requires authentication.

    Returns:
        The caller's account, without the password hash
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(principal=context.principal)
    )


@router.post("", response_model=TokenResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> TokenResponse:
    """Log in with e-mail and password.

    Returns:
        A signed bearer token

    Raises:
        InvalidCredentialsError: If the e-mail or password does not match
    """
    return await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
