"""Organization domain service."""

from uuid import uuid4

import logfire

from gatehouse.domain.error import ConflictError, NotFoundError
from gatehouse.domain.model import Organization, utcnow
from gatehouse.domain.repository import OrganizationRepository
from gatehouse.domain.value import OrgId, Slug, UserId

from .base import Service


class OrganizationService(Service):
    """Domain service for organization operations."""

    def __init__(self, organization_repository: OrganizationRepository) -> None:
        """Initialize organization service.

        Args:
            organization_repository: Organization repository
        """
        self.organization_repository = organization_repository

    async def create_organization(
        self, name: str, slug: Slug, created_by: UserId
    ) -> Organization:
        """Create an organization with no members.

        Args:
            name: Display name
            slug: Globally unique slug
            created_by: Identity creating the organization

        Returns:
            Created organization

        Raises:
            ConflictError: If the slug is already taken
        """
        with logfire.span(
            "organization_service.create_organization", name=name, slug=slug.root
        ):
            if await self.organization_repository.find_by_slug(slug):
                logfire.warn("Organization slug taken", slug=slug.root)
                raise ConflictError("An organization with this slug already exists")

            organization = Organization(
                id=OrgId(str(uuid4())),
                name=name,
                slug=slug,
                created_by=created_by,
                created_at=utcnow(),
                member_count=0,
            )
            saved = await self.organization_repository.save(organization)
            logfire.info(
                "Organization created",
                org_id=saved.id,
                slug=slug.root,
                created_by=created_by,
            )
            return saved

    async def find_by_id(self, org_id: OrgId) -> Organization | None:
        """Find an organization by ID.

        Args:
            org_id: Organization ID

        Returns:
            Organization if found, None otherwise
        """
        with logfire.span("organization_service.find_by_id", org_id=org_id):
            return await self.organization_repository.find_by_id(org_id)

    async def get_by_id(self, org_id: OrgId) -> Organization:
        """Get an organization by ID.

        Raises:
            NotFoundError: If the organization does not exist
        """
        organization = await self.find_by_id(org_id)
        if not organization:
            raise NotFoundError("Organization", org_id)
        return organization

    async def list_organizations(self) -> list[Organization]:
        """List all organizations ordered by name."""
        with logfire.span("organization_service.list_organizations"):
            organizations = await self.organization_repository.list_all()
            logfire.info("Organizations listed", count=len(organizations))
            return organizations
