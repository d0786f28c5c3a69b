"""In-memory repository implementations for testing."""

from .batch import InMemoryBatchWriter, InMemoryWriteBatch
from .invite import InMemoryInviteRepository
from .organization import InMemoryOrganizationRepository
from .store import InMemoryRecordStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryBatchWriter",
    "InMemoryInviteRepository",
    "InMemoryOrganizationRepository",
    "InMemoryRecordStore",
    "InMemoryUserRepository",
    "InMemoryWriteBatch",
]
