"""Shared in-memory record store for tests and local runs.

Repositories and write batches built on the same store see each other's
writes, the way SQL repositories sharing a session do.
"""

from collections.abc import Callable
from typing import Optional

from gatehouse.domain.model import Invite, Organization, User
from gatehouse.domain.value import InviteId, OrgId, UserId

FaultInjector = Callable[[str], None]


class InMemoryRecordStore:
    """Users, invites and organizations held in dictionaries.

    Attributes:
        fault_injector: Optional callback invoked with the operation name
            before each staged batch operation is applied. Raising from it
            simulates a store failure part-way through a commit.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.invites: dict[InviteId, Invite] = {}
        self.organizations: dict[OrgId, Organization] = {}
        self.fault_injector: Optional[FaultInjector] = None

    def clear(self) -> None:
        self.users.clear()
        self.invites.clear()
        self.organizations.clear()
        self.fault_injector = None
