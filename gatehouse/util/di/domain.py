"""Domain layer DI providers."""

from dishka import Scope, provide

from gatehouse.config import AuthSettings
from gatehouse.domain.repository import (
    BatchWriter,
    InviteRepository,
    OrganizationRepository,
    UserRepository,
)
from gatehouse.domain.service import (
    IdentityClient,
    IdentityService,
    InviteService,
    JWTService,
    MembershipService,
    OrganizationService,
    UserService,
)
from gatehouse.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request (and each hook call) gets fresh service instances with
    their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide claims token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, batch_writer: BatchWriter
    ) -> UserService:
        """Provide user record domain service."""
        return UserService(user_repository=user_repository, batch_writer=batch_writer)

    @provide
    def get_invite_service(self, invite_repository: InviteRepository) -> InviteService:
        """Provide invite domain service."""
        return InviteService(invite_repository=invite_repository)

    @provide
    def get_organization_service(
        self, organization_repository: OrganizationRepository
    ) -> OrganizationService:
        """Provide organization domain service."""
        return OrganizationService(organization_repository=organization_repository)

    @provide
    def get_membership_service(self, batch_writer: BatchWriter) -> MembershipService:
        """Provide membership materialization service."""
        return MembershipService(batch_writer=batch_writer)

    @provide
    def get_identity_service(self, identity_client: IdentityClient) -> IdentityService:
        """Provide identity provider domain service."""
        return IdentityService(identity_client=identity_client)
