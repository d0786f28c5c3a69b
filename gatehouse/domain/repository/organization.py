"""Organization repository interface."""

from abc import ABC, abstractmethod

from gatehouse.domain.model.organization import Organization
from gatehouse.domain.value import OrgId, Slug


class OrganizationRepository(ABC):
    """Repository for Organization entity."""

    @abstractmethod
    async def find_by_id(self, org_id: OrgId) -> Organization | None:
        """Find an organization by ID.

        Args:
            org_id: Organization ID

        Returns:
            The organization if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Organization | None:
        """Find an organization by its slug.

        Args:
            slug: Organization slug

        Returns:
            The organization if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[Organization]:
        """List all organizations ordered by name."""
        pass

    @abstractmethod
    async def save(self, organization: Organization) -> Organization:
        """Save an organization (create or update).

        ``member_count`` is written only on create; later changes to it go
        through a write batch.

        Args:
            organization: The organization to save

        Returns:
            The saved organization
        """
        pass
