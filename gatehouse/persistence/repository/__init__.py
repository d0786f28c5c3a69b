"""SQL repository implementations."""

from gatehouse.persistence.repository.batch import SqlBatchWriter, SqlWriteBatch
from gatehouse.persistence.repository.invite import SqlInviteRepository
from gatehouse.persistence.repository.organization import SqlOrganizationRepository
from gatehouse.persistence.repository.user import SqlUserRepository

__all__ = [
    "SqlBatchWriter",
    "SqlInviteRepository",
    "SqlOrganizationRepository",
    "SqlUserRepository",
    "SqlWriteBatch",
]
