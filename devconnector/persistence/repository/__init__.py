"""PostgreSQL repository implementations."""

from devconnector.persistence.repository.post import PostgresPostRepository
from devconnector.persistence.repository.profile import PostgresProfileRepository
from devconnector.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresProfileRepository",
]
