"""Domain layer errors."""

from dataclasses import dataclass
from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


@dataclass(frozen=True)
class FieldError:
    """A single failed field check."""

    param: str
    msg: str


class ValidationError(DomainError):
    """Domain validation error.

    Carries every failed field check, not just the first one.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__("; ".join(f"{e.param}: {e.msg}" for e in errors))


class UnauthorizedReason(str, Enum):
    """Why a request was rejected as unauthorized."""

    NO_TOKEN = "no_token"
    INVALID_TOKEN = "invalid_token"
    NOT_OWNER = "not_owner"


class UnauthorizedError(DomainError):
    """Raised when a request has no usable principal or the principal may not act."""

    _messages = {
        UnauthorizedReason.NO_TOKEN: "No token, authorization denied",
        UnauthorizedReason.INVALID_TOKEN: "Token is not valid",
        UnauthorizedReason.NOT_OWNER: "User not authorized",
    }

    def __init__(self, reason: UnauthorizedReason, message: str | None = None):
        self.reason = reason
        super().__init__(message or self._messages[reason])


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DomainConflictError(DomainError):
    """Raised when a request conflicts with the current state of an aggregate."""

    pass


class AlreadyLikedError(DomainConflictError):
    def __init__(self) -> None:
        super().__init__("Post already liked")


class NotLikedError(DomainConflictError):
    def __init__(self) -> None:
        super().__init__("Post has not yet been liked")


class UserExistsError(DomainConflictError):
    def __init__(self) -> None:
        super().__init__("User already exists")


class InvalidCredentialsError(DomainConflictError):
    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class NoProfileError(DomainConflictError):
    def __init__(self) -> None:
        super().__init__("There is no profile for this user")
