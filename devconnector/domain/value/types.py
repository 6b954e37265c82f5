"""Domain value objects for DevConnector.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import field_validator

from devconnector.domain.value.common import RootValueObject, ValueObject
from devconnector.domain.value.identifiers import UserId


class Principal(ValueObject):
    """Authenticated identity for the duration of one request.

    Never persisted; rebuilt from a verified bearer token on every request.
    """

    id: UserId


class Skills(RootValueObject[list[str]]):
    """Profile skill list, parsed from a comma-separated string.

    Example: ``"python, fastapi ,sql"`` -> ``["python", "fastapi", "sql"]``

    Blank input parses to an empty list; a profile requires at least one
    skill when it is built.
    """

    @field_validator("root", mode="before")
    @classmethod
    def split_comma_separated(cls, v: object) -> object:
        """Accept either a list or a comma-separated string."""
        if isinstance(v, str):
            return [skill.strip() for skill in v.split(",") if skill.strip()]
        return v


class SocialLinks(ValueObject):
    """Links to a user's social media accounts."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def merged_with(self, other: "SocialLinks") -> "SocialLinks":
        """Return links where every link set on other replaces ours."""
        provided = {k: v for k, v in other.model_dump().items() if v}
        return self.model_copy(update=provided)
