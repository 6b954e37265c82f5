"""Ownership checks shared by every owner-restricted mutation."""

import logfire

from devconnector.domain.error import UnauthorizedError, UnauthorizedReason
from devconnector.domain.model.common import Owned
from devconnector.domain.value import Principal


def is_owner(principal: Principal, resource: Owned) -> bool:
    """Whether principal is the recorded owner of resource."""
    return resource.owner_id == principal.id


def require_owner(principal: Principal, resource: Owned, resource_name: str) -> None:
    """Reject principal unless it owns resource.

    Args:
        principal: Acting identity
        resource: Post, comment or profile being mutated
        resource_name: Name used in the error message

    Raises:
        UnauthorizedError: If principal is not the owner
    """
    if not is_owner(principal, resource):
        logfire.warn(
            "Ownership check failed",
            resource=resource_name,
            user_id=str(principal.id),
            owner_id=str(resource.owner_id),
        )
        raise UnauthorizedError(
            UnauthorizedReason.NOT_OWNER,
            f"User not authorized to delete this {resource_name}",
        )
