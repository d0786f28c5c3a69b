"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gatehouse.domain.model.user import User
from gatehouse.domain.value import OrgId, Role, UserId


class UserRepository(ABC):
    """Repository for user records.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user record by identity uid.

        Args:
            user_id: The identity's uid

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email_and_role(self, email: str, role: Role) -> Optional[User]:
        """Find a user record by email carrying a given role.

        Used by account-creation validation to recognise the super-role.

        Args:
            email: The user's email address
            role: Role the record must carry

        Returns:
            The first matching user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_org(self, org_id: OrgId) -> list[User]:
        """List user records bound to an organization.

        Args:
            org_id: Organization ID

        Returns:
            Users ordered by creation time
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user record (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
