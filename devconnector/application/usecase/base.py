"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class MessageResponse(BaseModel):
    """Acknowledgement of an operation with no resource to return."""

    msg: str


class TokenResponse(BaseModel):
    """Bearer token issued on login or registration."""

    token: str
