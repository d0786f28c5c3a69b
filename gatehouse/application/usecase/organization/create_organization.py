"""Create organization use case."""

import logfire
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.domain.error import ValidationError
from gatehouse.domain.service import OrganizationService
from gatehouse.domain.value import Slug, UserId


class CreateOrganizationRequest(BaseModel):
    """Request to create an organization."""

    creator_id: str
    name: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=100)


class CreateOrganizationResponse(BaseModel):
    """Created organization."""

    org_id: str


class CreateOrganizationUseCase(BaseUseCase):
    """Use case for creating a tenant organization."""

    def __init__(self, organization_service: OrganizationService) -> None:
        """Initialize create organization use case.

        Args:
            organization_service: Organization domain service
        """
        self.organization_service = organization_service

    async def execute(
        self, request: CreateOrganizationRequest
    ) -> CreateOrganizationResponse:
        """Create an organization.

        Args:
            request: Name, slug and creator

        Returns:
            ID of the new organization

        Raises:
            ValidationError: If the slug is malformed
            ConflictError: If the slug is already taken
        """
        try:
            slug = Slug(request.slug)
        except PydanticValidationError as e:
            raise ValidationError(e.errors()[0]["msg"]) from e

        with logfire.span("create_organization.execute", slug=slug.root):
            organization = await self.organization_service.create_organization(
                name=request.name.strip(),
                slug=slug,
                created_by=UserId(request.creator_id),
            )
            return CreateOrganizationResponse(org_id=organization.id)
