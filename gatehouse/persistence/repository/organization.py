"""SQL implementation of Organization repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse.domain.model import Organization
from gatehouse.domain.repository import OrganizationRepository
from gatehouse.domain.value import OrgId, Slug
from gatehouse.persistence.mappers import organization_to_dict, row_to_organization
from gatehouse.persistence.tables import organizations_table


class SqlOrganizationRepository(OrganizationRepository):
    """SQL implementation of OrganizationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, org_id: OrgId) -> Optional[Organization]:
        stmt = select(organizations_table).where(organizations_table.c.id == org_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_organization(dict(row)) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Organization]:
        stmt = select(organizations_table).where(
            organizations_table.c.slug == slug.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_organization(dict(row)) if row else None

    async def list_all(self) -> list[Organization]:
        stmt = select(organizations_table).order_by(
            organizations_table.c.name.asc(), organizations_table.c.id.asc()
        )
        result = await self.session.execute(stmt)
        return [row_to_organization(dict(row)) for row in result.mappings().all()]

    async def save(self, organization: Organization) -> Organization:
        """Save an organization.

        On update the stored member count is left alone.

        Args:
            organization: Organization to save

        Returns:
            Saved organization
        """
        existing = await self.find_by_id(organization.id)

        org_dict = organization_to_dict(organization)

        if existing:
            org_dict.pop("member_count")
            stmt = (
                organizations_table.update()
                .where(organizations_table.c.id == organization.id)
                .values(**org_dict)
            )
        else:
            stmt = organizations_table.insert().values(**org_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return organization
