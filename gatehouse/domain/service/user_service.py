"""User domain service."""

import logfire

from gatehouse.domain.error import NotFoundError, PermissionDeniedError
from gatehouse.domain.model import User, utcnow
from gatehouse.domain.repository import BatchWriter, UserRepository
from gatehouse.domain.value import OrgId, Role, UserId

from .base import Service


class UserService(Service):
    """Domain service for user record operations."""

    def __init__(
        self, user_repository: UserRepository, batch_writer: BatchWriter
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            batch_writer: Factory for atomic write batches
        """
        self.user_repository = user_repository
        self.batch_writer = batch_writer

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Look up a user record, treating absence as a normal outcome.

        Args:
            user_id: Identity uid

        Returns:
            User record if present, None otherwise
        """
        with logfire.span("user_service.find_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            logfire.info("User record lookup", user_id=user_id, found=user is not None)
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: Identity uid

        Returns:
            User record

        Raises:
            NotFoundError: If user not found
        """
        user = await self.find_by_id(user_id)
        if not user:
            logfire.warn("User not found", user_id=user_id)
            raise NotFoundError("User", user_id)
        return user

    async def find_super_admin_by_email(self, email: str) -> User | None:
        """Find the super-role record for an email.

        Args:
            email: Candidate email

        Returns:
            Super-role user record if one exists, None otherwise
        """
        with logfire.span("user_service.find_super_admin_by_email", email=email):
            user = await self.user_repository.find_by_email_and_role(
                email, Role.SUPER_ADMIN
            )
            if user:
                logfire.info("Super admin record found", email=email, user_id=user.id)
            return user

    async def list_members(self, org_id: OrgId) -> list[User]:
        """List user records bound to an organization.

        Args:
            org_id: Organization ID

        Returns:
            Users ordered by creation time
        """
        with logfire.span("user_service.list_members", org_id=org_id):
            return await self.user_repository.find_by_org(org_id)

    async def update_role(self, user_id: UserId, role: Role | None) -> User:
        """Change or clear a member's role.

        Clearing the role deactivates the member: the next sign-in is
        rejected. The change is committed before this returns, so sign-ins
        validated on other sessions already see it.

        Args:
            user_id: Member uid
            role: New member role, or None to deactivate

        Returns:
            Updated user record

        Raises:
            NotFoundError: If the record does not exist
            PermissionDeniedError: If the record is the super-role
            ValueError: If ``role`` is the super-role sentinel
        """
        if role is not None and not role.is_member_role:
            raise ValueError("Role must be one of: viewer, user, admin")

        with logfire.span(
            "user_service.update_role",
            user_id=user_id,
            role=role.value if role else None,
        ):
            user = await self.get_by_id(user_id)
            if user.is_super_admin:
                logfire.warn("Refusing to change super admin role", user_id=user_id)
                raise PermissionDeniedError("The super admin role cannot be changed")

            updated = user.model_copy(update={"role": role, "updated_at": utcnow()})
            await self.batch_writer.batch().update_user(updated).commit()
            logfire.info(
                "User role updated",
                user_id=user_id,
                previous_role=user.role.value if user.role else None,
                role=role.value if role else None,
            )
            return updated

    async def save(self, user: User) -> User:
        """Save user record (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_service.save", user_id=user.id):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=saved.id)
            return saved
