"""In-memory user repository for testing."""

from typing import Optional

from gatehouse.domain.model import User
from gatehouse.domain.repository import UserRepository
from gatehouse.domain.value import OrgId, Role, UserId
from gatehouse.persistence.repository.inmemory.store import InMemoryRecordStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryRecordStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by identity uid."""
        return self._store.users.get(user_id)

    async def find_by_email_and_role(self, email: str, role: Role) -> Optional[User]:
        """Find the earliest user with an email carrying a role."""
        matches = [
            user
            for user in self._store.users.values()
            if user.email == email and user.role == role
        ]
        if not matches:
            return None
        return min(matches, key=lambda u: u.created_at)

    async def find_by_org(self, org_id: OrgId) -> list[User]:
        """List users bound to an organization."""
        users = [u for u in self._store.users.values() if u.org_id == org_id]
        return sorted(users, key=lambda u: u.created_at)

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._store.users[user.id] = user
        return user
