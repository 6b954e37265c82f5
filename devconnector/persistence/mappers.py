"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from devconnector.domain.model import (
    Comment,
    Education,
    Experience,
    Like,
    Post,
    Profile,
    User,
)
from devconnector.domain.value import (
    CommentId,
    EducationId,
    ExperienceId,
    OrderedItems,
    PostId,
    ProfileId,
    SocialLinks,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        avatar_url=row.get("avatar_url"),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    return Like(user_id=UserId(_uuid(row["user_id"])), created_at=row["created_at"])


def row_to_comment(row: Dict[str, Any]) -> Comment:
    return Comment(
        id=CommentId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        text=row["text"],
        name=row["name"],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def row_to_post(
    row: Dict[str, Any],
    like_rows: Iterable[Dict[str, Any]] = (),
    comment_rows: Iterable[Dict[str, Any]] = (),
) -> Post:
    """Convert a posts row and its sub-collection rows to a Post.

    Args:
        row: posts row
        like_rows: post_likes rows, most recent first
        comment_rows: post_comments rows, most recent first

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        name=row["name"],
        avatar_url=row.get("avatar_url"),
        likes=OrderedItems[Like](tuple(row_to_like(r) for r in like_rows)),
        comments=OrderedItems[Comment](
            tuple(row_to_comment(r) for r in comment_rows)
        ),
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post to a posts row; likes and comments are stored separately."""
    return post.model_dump(exclude={"likes", "comments"})


def like_to_dict(post_id: PostId, like: Like) -> Dict[str, Any]:
    return {"post_id": post_id, **like.model_dump()}


def comment_to_dict(post_id: PostId, comment: Comment) -> Dict[str, Any]:
    return {"post_id": post_id, **comment.model_dump()}


def row_to_experience(row: Dict[str, Any]) -> Experience:
    return Experience(
        id=ExperienceId(_uuid(row["id"])),
        title=row["title"],
        company=row["company"],
        location=row.get("location"),
        from_date=row["from_date"],
        to_date=row.get("to_date"),
        current=row["current"],
        description=row.get("description"),
    )


def row_to_education(row: Dict[str, Any]) -> Education:
    return Education(
        id=EducationId(_uuid(row["id"])),
        school=row["school"],
        degree=row["degree"],
        fieldofstudy=row["fieldofstudy"],
        from_date=row["from_date"],
        to_date=row.get("to_date"),
        current=row["current"],
        description=row.get("description"),
    )


def row_to_profile(
    row: Dict[str, Any],
    experience_rows: Iterable[Dict[str, Any]] = (),
    education_rows: Iterable[Dict[str, Any]] = (),
) -> Profile:
    """Convert a profiles row and its sub-collection rows to a Profile.

    Args:
        row: profiles row
        experience_rows: profile_experience rows, most recent first
        education_rows: profile_education rows, most recent first

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        company=row.get("company"),
        website=row.get("website"),
        location=row.get("location"),
        bio=row.get("bio"),
        status=row["status"],
        github_username=row.get("github_username"),
        skills=list(row["skills"]),
        social=SocialLinks.model_validate(row.get("social") or {}),
        experience=OrderedItems[Experience](
            tuple(row_to_experience(r) for r in experience_rows)
        ),
        education=OrderedItems[Education](
            tuple(row_to_education(r) for r in education_rows)
        ),
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile to a profiles row; experience and education are stored separately."""
    data = profile.model_dump(exclude={"experience", "education", "social"})
    data["social"] = profile.social.model_dump(exclude_none=True)
    return data


def profile_fields_to_row(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a field update from the domain to column values."""
    row = dict(fields)
    if isinstance(row.get("social"), SocialLinks):
        row["social"] = row["social"].model_dump(exclude_none=True)
    return row


def experience_to_dict(profile_id: ProfileId, experience: Experience) -> Dict[str, Any]:
    return {"profile_id": profile_id, **experience.model_dump()}


def education_to_dict(profile_id: ProfileId, education: Education) -> Dict[str, Any]:
    return {"profile_id": profile_id, **education.model_dump()}
