"""Mock persistence providers for testing."""

from dishka import Scope, provide

from gatehouse.domain.repository import (
    BatchWriter,
    InviteRepository,
    OrganizationRepository,
    UserRepository,
)
from gatehouse.persistence.repository.inmemory import (
    InMemoryBatchWriter,
    InMemoryInviteRepository,
    InMemoryOrganizationRepository,
    InMemoryRecordStore,
    InMemoryUserRepository,
)
from gatehouse.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so every request against one container sees the
    same records; each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryRecordStore:
        """Provide the shared in-memory record store."""
        return InMemoryRecordStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryRecordStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, store: InMemoryRecordStore) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_organization_repository(
        self, store: InMemoryRecordStore
    ) -> OrganizationRepository:
        """Provide in-memory organization repository."""
        return InMemoryOrganizationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_batch_writer(self, store: InMemoryRecordStore) -> BatchWriter:
        """Provide in-memory write batch factory."""
        return InMemoryBatchWriter(store)
