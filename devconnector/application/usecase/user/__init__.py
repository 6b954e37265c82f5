"""User account use cases."""

from .delete_account import DeleteAccountRequest, DeleteAccountUseCase
from .register_user import RegisterUserRequest, RegisterUserUseCase

__all__ = [
    "DeleteAccountRequest",
    "DeleteAccountUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
]
