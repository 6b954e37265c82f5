"""Strongly typed identifiers for DevConnector domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import Callable, NewType, TypeVar
from uuid import UUID

from devconnector.domain.error import NotFoundError

# Aggregate identifiers
UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
ProfileId = NewType("ProfileId", UUID)

# Sub-item identifiers (only meaningful inside their parent aggregate)
CommentId = NewType("CommentId", UUID)
ExperienceId = NewType("ExperienceId", UUID)
EducationId = NewType("EducationId", UUID)

IdT = TypeVar("IdT")


def parse_id(value: str, id_type: Callable[[UUID], IdT], resource: str) -> IdT:
    """Parse an identifier taken from a request.

    A malformed identifier cannot name anything that exists, so it is
    reported as a missing resource rather than a bad request.

    Args:
        value: Raw identifier string
        id_type: NewType constructor to wrap the UUID in
        resource: Resource name used in the error

    Returns:
        Typed identifier

    Raises:
        NotFoundError: If value is not a valid UUID
    """
    try:
        return id_type(UUID(value))
    except (ValueError, TypeError, AttributeError):
        raise NotFoundError(resource, str(value))
