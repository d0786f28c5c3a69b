"""Application layer DI providers."""

from dishka import Scope, provide

from gatehouse.application.usecase.admin import BootstrapSuperAdminUseCase
from gatehouse.application.usecase.hook import (
    AfterCreateUseCase,
    BeforeCreateUseCase,
    BeforeSignInUseCase,
)
from gatehouse.application.usecase.invite import CreateInviteUseCase, ListInvitesUseCase
from gatehouse.application.usecase.member import UpdateMemberRoleUseCase
from gatehouse.application.usecase.organization import (
    CreateOrganizationUseCase,
    GetCurrentOrganizationUseCase,
    ListOrganizationsUseCase,
)
from gatehouse.config import Settings
from gatehouse.domain.service import (
    IdentityService,
    InviteService,
    MembershipService,
    OrganizationService,
    UserService,
)
from gatehouse.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Lifecycle hook use cases
    @provide
    def get_before_create_use_case(
        self, user_service: UserService, invite_service: InviteService
    ) -> BeforeCreateUseCase:
        """Provide account-creation validation use case."""
        return BeforeCreateUseCase(
            user_service=user_service, invite_service=invite_service
        )

    @provide
    def get_before_sign_in_use_case(
        self, user_service: UserService
    ) -> BeforeSignInUseCase:
        """Provide sign-in validation use case."""
        return BeforeSignInUseCase(user_service=user_service)

    @provide
    def get_after_create_use_case(
        self,
        user_service: UserService,
        invite_service: InviteService,
        membership_service: MembershipService,
    ) -> AfterCreateUseCase:
        """Provide membership materialization use case."""
        return AfterCreateUseCase(
            user_service=user_service,
            invite_service=invite_service,
            membership_service=membership_service,
        )

    # Organization use cases
    @provide
    def get_create_organization_use_case(
        self, organization_service: OrganizationService
    ) -> CreateOrganizationUseCase:
        """Provide create organization use case."""
        return CreateOrganizationUseCase(organization_service=organization_service)

    @provide
    def get_list_organizations_use_case(
        self, organization_service: OrganizationService
    ) -> ListOrganizationsUseCase:
        """Provide list organizations use case."""
        return ListOrganizationsUseCase(organization_service=organization_service)

    @provide
    def get_current_organization_use_case(
        self, organization_service: OrganizationService
    ) -> GetCurrentOrganizationUseCase:
        """Provide current organization use case."""
        return GetCurrentOrganizationUseCase(organization_service=organization_service)

    # Invite use cases
    @provide
    def get_create_invite_use_case(
        self,
        invite_service: InviteService,
        organization_service: OrganizationService,
        settings: Settings,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            invite_service=invite_service,
            organization_service=organization_service,
            settings=settings,
        )

    @provide
    def get_list_invites_use_case(
        self, invite_service: InviteService
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(invite_service=invite_service)

    # Member and admin use cases
    @provide
    def get_update_member_role_use_case(
        self, user_service: UserService, identity_service: IdentityService
    ) -> UpdateMemberRoleUseCase:
        """Provide member role update use case."""
        return UpdateMemberRoleUseCase(
            user_service=user_service, identity_service=identity_service
        )

    @provide
    def get_bootstrap_super_admin_use_case(
        self, identity_service: IdentityService, user_service: UserService
    ) -> BootstrapSuperAdminUseCase:
        """Provide super admin bootstrap use case."""
        return BootstrapSuperAdminUseCase(
            identity_service=identity_service, user_service=user_service
        )
