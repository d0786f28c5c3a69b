"""SQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse.domain.model import User
from gatehouse.domain.repository import UserRepository
from gatehouse.domain.value import OrgId, Role, UserId
from gatehouse.persistence.mappers import row_to_user, user_to_dict
from gatehouse.persistence.tables import users_table


class SqlUserRepository(UserRepository):
    """SQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by identity uid.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email_and_role(self, email: str, role: Role) -> Optional[User]:
        """Find the first user with an email carrying a role.

        Args:
            email: Email to search for
            role: Role the record must carry

        Returns:
            User if found, None otherwise
        """
        stmt = (
            select(users_table)
            .where(users_table.c.email == email)
            .where(users_table.c.role == role.value)
            .order_by(users_table.c.created_at.asc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_org(self, org_id: OrgId) -> list[User]:
        """List users bound to an organization.

        Args:
            org_id: Organization ID

        Returns:
            Users ordered by creation time
        """
        stmt = (
            select(users_table)
            .where(users_table.c.org_id == org_id)
            .order_by(users_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user
