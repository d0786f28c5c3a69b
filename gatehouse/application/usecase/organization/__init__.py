"""Organization use cases."""

from gatehouse.application.usecase.organization.create_organization import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
)
from gatehouse.application.usecase.organization.get_current_organization import (
    CurrentOrganization,
    GetCurrentOrganizationResponse,
    GetCurrentOrganizationUseCase,
)
from gatehouse.application.usecase.organization.list_organizations import (
    ListOrganizationsResponse,
    ListOrganizationsUseCase,
    OrganizationItem,
)

__all__ = [
    "CreateOrganizationRequest",
    "CreateOrganizationResponse",
    "CreateOrganizationUseCase",
    "CurrentOrganization",
    "GetCurrentOrganizationResponse",
    "GetCurrentOrganizationUseCase",
    "ListOrganizationsResponse",
    "ListOrganizationsUseCase",
    "OrganizationItem",
]
