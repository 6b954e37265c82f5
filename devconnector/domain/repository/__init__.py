"""Repository interfaces for DevConnector domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from devconnector.domain.repository.post import PostRepository
from devconnector.domain.repository.profile import ProfileRepository
from devconnector.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "ProfileRepository",
]
