"""Domain model entities for DevConnector."""

from devconnector.domain.model.post import Comment, Like, Post
from devconnector.domain.model.profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
)
from devconnector.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Like",
    "Comment",
    "Profile",
    "Experience",
    "Education",
    "ProfileFields",
]
