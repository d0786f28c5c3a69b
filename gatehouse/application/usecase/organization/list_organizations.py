"""List organizations use case."""

from datetime import datetime

from pydantic import BaseModel

from gatehouse.domain.service import OrganizationService


class OrganizationItem(BaseModel):
    """Organization in a listing."""

    id: str
    name: str
    slug: str
    created_by: str
    created_at: datetime
    member_count: int


class ListOrganizationsResponse(BaseModel):
    """Organizations ordered by name."""

    orgs: list[OrganizationItem]


class ListOrganizationsUseCase:
    """Use case for listing every organization."""

    def __init__(self, organization_service: OrganizationService) -> None:
        self.organization_service = organization_service

    async def execute(self) -> ListOrganizationsResponse:
        """List organizations ordered by name."""
        organizations = await self.organization_service.list_organizations()
        return ListOrganizationsResponse(
            orgs=[
                OrganizationItem(
                    id=org.id,
                    name=org.name,
                    slug=org.slug.root,
                    created_by=org.created_by,
                    created_at=org.created_at,
                    member_count=org.member_count,
                )
                for org in organizations
            ]
        )
