"""In-memory organization repository for testing."""

from typing import Optional

from gatehouse.domain.model import Organization
from gatehouse.domain.repository import OrganizationRepository
from gatehouse.domain.value import OrgId, Slug
from gatehouse.persistence.repository.inmemory.store import InMemoryRecordStore


class InMemoryOrganizationRepository(OrganizationRepository):
    """In-memory implementation of OrganizationRepository for testing."""

    def __init__(self, store: InMemoryRecordStore) -> None:
        self._store = store

    async def find_by_id(self, org_id: OrgId) -> Optional[Organization]:
        return self._store.organizations.get(org_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Organization]:
        for organization in self._store.organizations.values():
            if organization.slug == slug:
                return organization
        return None

    async def list_all(self) -> list[Organization]:
        return sorted(self._store.organizations.values(), key=lambda o: (o.name, o.id))

    async def save(self, organization: Organization) -> Organization:
        existing = self._store.organizations.get(organization.id)
        if existing is not None:
            # Member count only changes through write batches
            organization = organization.model_copy(
                update={"member_count": existing.member_count}
            )
        self._store.organizations[organization.id] = organization
        return organization
