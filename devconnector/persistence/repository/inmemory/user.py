"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from devconnector.domain.model.user import User
from devconnector.domain.repository.user import UserRepository
from devconnector.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email, ignoring case."""
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has the same e-mail
        """
        owner = await self.find_by_email(user.email)
        if owner is not None and owner.id != user.id:
            raise IntegrityError("Duplicate e-mail", None, Exception())
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None
