"""User domain service."""

import hashlib
from datetime import datetime
from urllib.parse import urlencode
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from devconnector.domain.error import (
    InvalidCredentialsError,
    NotFoundError,
    UserExistsError,
)
from devconnector.domain.model import User
from devconnector.domain.repository import (
    PostRepository,
    ProfileRepository,
    UserRepository,
)
from devconnector.domain.value import Principal, UserId

from .base import Service
from .credentials import PasswordHasher


def gravatar_url(email: str) -> str:
    """Gravatar image URL for email (200px, PG rated, mystery-man fallback)."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": "200", "r": "pg", "d": "mm"})
    return f"https://www.gravatar.com/avatar/{digest}?{query}"


class UserService(Service):
    """Domain service for account operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        profile_repository: ProfileRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository, for cascading account deletion
            profile_repository: Profile repository, for cascading account deletion
            password_hasher: Credential hashing adapter
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.profile_repository = profile_repository
        self.password_hasher = password_hasher

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(self, name: str, email: str, password: str) -> User:
        """Create a new account.

        Args:
            name: Display name
            email: Login e-mail, unique across users
            password: Plain-text password, hashed before storage

        Returns:
            Created user

        Raises:
            UserExistsError: If the e-mail is already registered
        """
        email = email.strip().lower()
        with logfire.span("user_service.register", email=email):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing e-mail", email=email)
                raise UserExistsError()

            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                avatar_url=gravatar_url(email),
                password_hash=self.password_hasher.hash(password),
                created_at=datetime.now(),
            )
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Concurrent registration with same e-mail", email=email)
                raise UserExistsError()

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials.

        Both an unknown e-mail and a wrong password produce the same error.

        Raises:
            InvalidCredentialsError: If the credentials do not match a user
        """
        email = email.strip().lower()
        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user or not self.password_hasher.verify(
                password, user.password_hash
            ):
                logfire.warn("Invalid login attempt", email=email)
                raise InvalidCredentialsError()
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def delete_account(self, principal: Principal) -> None:
        """Delete principal's profile, every post they authored, then the user.

        Comments and likes left on other users' posts are kept.
        """
        with logfire.span("user_service.delete_account", user_id=str(principal.id)):
            posts_deleted = await self.post_repository.delete_by_author(principal.id)
            profile_deleted = await self.profile_repository.delete_by_user(
                principal.id
            )
            await self.user_repository.delete(principal.id)
            logfire.info(
                "Account deleted",
                user_id=str(principal.id),
                posts_deleted=posts_deleted,
                profile_deleted=profile_deleted,
            )
