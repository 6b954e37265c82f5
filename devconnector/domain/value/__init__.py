"""Domain value objects for DevConnector."""

from devconnector.domain.value.identifiers import (
    CommentId,
    EducationId,
    ExperienceId,
    PostId,
    ProfileId,
    UserId,
    parse_id,
)
from devconnector.domain.value.sequence import OrderedItems
from devconnector.domain.value.types import Principal, Skills, SocialLinks

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "ProfileId",
    "CommentId",
    "ExperienceId",
    "EducationId",
    "parse_id",
    # Types
    "OrderedItems",
    "Principal",
    "Skills",
    "SocialLinks",
]
