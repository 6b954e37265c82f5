"""Base model for all domain entities."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from devconnector.domain.value import UserId


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; edits produce a new instance via
    ``model_copy(update=...)`` or the aggregate mutator.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


class Owned(Protocol):
    """Anything with a recorded owner that ownership checks can compare against."""

    @property
    def owner_id(self) -> UserId: ...
