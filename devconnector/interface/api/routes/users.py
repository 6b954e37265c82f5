"""User registration routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, EmailStr, Field

from devconnector.application.usecase.base import TokenResponse
from devconnector.application.usecase.user import (
    RegisterUserRequest,
    RegisterUserUseCase,
)

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6)


@router.post("", response_model=TokenResponse)
async def register_user(
    request: RegisterAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> TokenResponse:
    """Register a new account and log it in.

    Returns:
        A signed bearer token for the new account

    Raises:
        UserExistsError: If the e-mail is already registered
    """
    return await register_user_use_case.execute(
        RegisterUserRequest(
            name=request.name, email=request.email, password=request.password
        )
    )
