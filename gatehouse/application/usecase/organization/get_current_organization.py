"""Get current user's organization use case."""

from pydantic import BaseModel

from gatehouse.domain.model import ClaimsSet, MemberClaims
from gatehouse.domain.service import OrganizationService


class CurrentOrganization(BaseModel):
    """Public view of the caller's organization."""

    id: str
    name: str
    slug: str


class GetCurrentOrganizationResponse(BaseModel):
    """Caller's organization, or None when the token names none."""

    org: CurrentOrganization | None = None


class GetCurrentOrganizationUseCase:
    """Resolve the organization named by the caller's claims.

    Works purely from the token's claims, so it reflects the organization as
    of the token's last refresh.
    """

    def __init__(self, organization_service: OrganizationService) -> None:
        self.organization_service = organization_service

    async def execute(self, claims: ClaimsSet | None) -> GetCurrentOrganizationResponse:
        """Look up the organization the claims are scoped to.

        Args:
            claims: Verified claims of the caller

        Returns:
            Organization summary, or an empty response for the super-role,
            a not-yet-materialized identity, or a deleted organization
        """
        if not isinstance(claims, MemberClaims):
            return GetCurrentOrganizationResponse(org=None)

        organization = await self.organization_service.find_by_id(claims.org_id)
        if not organization:
            return GetCurrentOrganizationResponse(org=None)

        return GetCurrentOrganizationResponse(
            org=CurrentOrganization(
                id=organization.id,
                name=organization.name,
                slug=organization.slug.root,
            )
        )
