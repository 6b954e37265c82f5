"""Edits of the nested collections inside Post and Profile.

Every function is pure: it takes an aggregate, checks the precondition of
the edit and returns a new aggregate with the edit applied. New items are
always inserted at the front. Persisting the change is the caller's job.
"""

from datetime import datetime
from typing import Any
from uuid import uuid4

from devconnector.domain.error import (
    AlreadyLikedError,
    FieldError,
    NotFoundError,
    NotLikedError,
    ValidationError,
)
from devconnector.domain.model import (
    Comment,
    Education,
    Experience,
    Like,
    Post,
    Profile,
    ProfileFields,
    User,
)
from devconnector.domain.value import (
    CommentId,
    EducationId,
    ExperienceId,
    Principal,
    ProfileId,
)

from .ownership_policy import require_owner


# Likes


def add_like(post: Post, principal: Principal) -> Post:
    """Prepend principal's like.

    Raises:
        AlreadyLikedError: If principal already likes the post
    """
    if post.liked_by(principal.id):
        raise AlreadyLikedError()
    like = Like(user_id=principal.id, created_at=datetime.now())
    return post.model_copy(update={"likes": post.likes.insert_front(like)})


def remove_like(post: Post, principal: Principal) -> Post:
    """Remove principal's like.

    Raises:
        NotLikedError: If principal does not like the post
    """
    if not post.liked_by(principal.id):
        raise NotLikedError()
    likes = post.likes.remove_where(lambda like: like.user_id == principal.id)
    return post.model_copy(update={"likes": likes})


# Comments


def add_comment(post: Post, author: User, text: str) -> Post:
    """Prepend a new comment by author, snapshotting their name and avatar.

    Raises:
        ValidationError: If text is empty
    """
    if not text or not text.strip():
        raise ValidationError([FieldError("text", "Text is required")])
    comment = Comment(
        id=CommentId(uuid4()),
        user_id=author.id,
        text=text,
        name=author.name,
        avatar_url=author.avatar_url,
        created_at=datetime.now(),
    )
    return post.model_copy(update={"comments": post.comments.insert_front(comment)})


def remove_comment(post: Post, principal: Principal, comment_id: CommentId) -> Post:
    """Remove one of principal's own comments.

    Raises:
        NotFoundError: If the post has no such comment
        UnauthorizedError: If the comment belongs to someone else
    """
    comment = post.find_comment(comment_id)
    if comment is None:
        raise NotFoundError("Comment", str(comment_id))
    require_owner(principal, comment, "comment")
    comments = post.comments.remove_where(lambda c: c.id == comment_id)
    return post.model_copy(update={"comments": comments})


# Experience and education


def add_experience(profile: Profile, experience: Experience) -> Profile:
    """Prepend an experience entry."""
    return profile.model_copy(
        update={"experience": profile.experience.insert_front(experience)}
    )


def delete_experience(profile: Profile, experience_id: ExperienceId) -> Profile:
    """Remove an experience entry; an unknown id leaves the profile unchanged."""
    experience = profile.experience.remove_where(lambda e: e.id == experience_id)
    return profile.model_copy(update={"experience": experience})


def add_education(profile: Profile, education: Education) -> Profile:
    """Prepend an education entry."""
    return profile.model_copy(
        update={"education": profile.education.insert_front(education)}
    )


def delete_education(profile: Profile, education_id: EducationId) -> Profile:
    """Remove an education entry; an unknown id leaves the profile unchanged."""
    education = profile.education.remove_where(lambda e: e.id == education_id)
    return profile.model_copy(update={"education": education})


# Profile fields


def new_profile(principal: Principal, fields: ProfileFields) -> Profile:
    """Build a fresh profile owned by principal.

    Raises:
        ValidationError: If status or skills are missing
    """
    errors = []
    if not fields.status:
        errors.append(FieldError("status", "Status is required"))
    if not fields.skills:
        errors.append(FieldError("skills", "Skills is required"))
    if errors:
        raise ValidationError(errors)
    return Profile(
        id=ProfileId(uuid4()),
        user_id=principal.id,
        social=fields.social,
        created_at=datetime.now(),
        **fields.provided(),
    )


def profile_changes(profile: Profile, fields: ProfileFields) -> dict[str, Any]:
    """Compute the field updates that merge fields into profile.

    Only non-empty values are applied; social links are merged per link.
    """
    changes = fields.provided()
    social = profile.social.merged_with(fields.social)
    if social != profile.social:
        changes["social"] = social
    return changes


def merge_profile(profile: Profile, fields: ProfileFields) -> Profile:
    """Return profile with the provided fields of fields applied."""
    return profile.model_copy(update=profile_changes(profile, fields))
