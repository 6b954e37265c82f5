"""PostgreSQL implementation of Profile repository."""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import Table, delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.domain.model import Education, Experience, Profile
from devconnector.domain.repository import ProfileRepository
from devconnector.domain.value import EducationId, ExperienceId, ProfileId, UserId
from devconnector.persistence.mappers import (
    education_to_dict,
    experience_to_dict,
    profile_fields_to_row,
    profile_to_dict,
    row_to_profile,
)
from devconnector.persistence.tables import (
    profile_education_table,
    profile_experience_table,
    profiles_table,
)


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository.

    Experience and education entries live in their own tables, one row per
    entry. The unique constraint on profiles.user_id keeps one profile per user.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_children(
        self, table: Table, profile_ids: list[UUID]
    ) -> dict[UUID, list[dict[str, Any]]]:
        """Fetch experience or education rows for several profiles at once.

        Returns:
            Dict mapping profile_id -> rows, most recent first
        """
        if not profile_ids:
            return {}

        stmt = (
            select(table)
            .where(table.c.profile_id.in_(profile_ids))
            .order_by(desc(table.c.seq))
        )
        result = await self.session.execute(stmt)

        children: dict[UUID, list[dict[str, Any]]] = defaultdict(list)
        for row in result.mappings():
            children[row["profile_id"]].append(dict(row))
        return children

    async def _hydrate(self, rows: list[dict[str, Any]]) -> List[Profile]:
        profile_ids = [row["id"] for row in rows]
        experience = await self._fetch_children(profile_experience_table, profile_ids)
        education = await self._fetch_children(profile_education_table, profile_ids)
        return [
            row_to_profile(
                row, experience.get(row["id"], []), education.get(row["id"], [])
            )
            for row in rows
        ]

    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        profiles = await self._hydrate([dict(row)])
        return profiles[0]

    async def find_all(self) -> List[Profile]:
        stmt = select(profiles_table).order_by(desc(profiles_table.c.created_at))
        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings()]
        return await self._hydrate(rows)

    async def save(self, profile: Profile) -> Profile:
        """Insert a new profile with its experience and education.

        Runs in a savepoint; a second profile for the same user raises
        IntegrityError without poisoning the outer transaction.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                profiles_table.insert().values(**profile_to_dict(profile))
            )
            # Oldest first, so seq order matches the aggregate's order
            for experience in reversed(profile.experience.root):
                await self.session.execute(
                    profile_experience_table.insert().values(
                        **experience_to_dict(profile.id, experience)
                    )
                )
            for education in reversed(profile.education.root):
                await self.session.execute(
                    profile_education_table.insert().values(
                        **education_to_dict(profile.id, education)
                    )
                )
        return profile

    async def update_fields(
        self, user_id: UserId, fields: dict[str, Any]
    ) -> Optional[Profile]:
        """Set fields on the user's profile in a single UPDATE statement."""
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.user_id == user_id)
            .values(**profile_fields_to_row(fields))
            .returning(*profiles_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        if not row:
            return None
        profiles = await self._hydrate([dict(row)])
        return profiles[0]

    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the user's profile; entries go with it (ON DELETE CASCADE)."""
        stmt = delete(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def add_experience(self, profile_id: ProfileId, experience: Experience) -> None:
        await self.session.execute(
            profile_experience_table.insert().values(
                **experience_to_dict(profile_id, experience)
            )
        )
        await self.session.flush()

    async def remove_experience(
        self, profile_id: ProfileId, experience_id: ExperienceId
    ) -> bool:
        stmt = delete(profile_experience_table).where(
            profile_experience_table.c.profile_id == profile_id,
            profile_experience_table.c.id == experience_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def add_education(self, profile_id: ProfileId, education: Education) -> None:
        await self.session.execute(
            profile_education_table.insert().values(
                **education_to_dict(profile_id, education)
            )
        )
        await self.session.flush()

    async def remove_education(
        self, profile_id: ProfileId, education_id: EducationId
    ) -> bool:
        stmt = delete(profile_education_table).where(
            profile_education_table.c.profile_id == profile_id,
            profile_education_table.c.id == education_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
