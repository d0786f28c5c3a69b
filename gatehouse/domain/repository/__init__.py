"""Repository interfaces for gatehouse records.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gatehouse.domain.repository.batch import BatchWriter, WriteBatch
from gatehouse.domain.repository.invite import InviteRepository
from gatehouse.domain.repository.organization import OrganizationRepository
from gatehouse.domain.repository.user import UserRepository

__all__ = [
    "BatchWriter",
    "InviteRepository",
    "OrganizationRepository",
    "UserRepository",
    "WriteBatch",
]
