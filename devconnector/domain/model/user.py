"""User aggregate root.

Users register with name, e-mail and password. The password hash stays
inside the domain; responses never include it.
"""

from datetime import datetime

from pydantic import Field

from devconnector.domain.model.common import DomainModel
from devconnector.domain.value import UserId


class User(DomainModel):
    """Registered account."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    avatar_url: str | None = None
    password_hash: str
    created_at: datetime = Field(default_factory=datetime.now)
