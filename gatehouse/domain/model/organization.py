"""Organization entity."""

from datetime import datetime

from pydantic import Field

from gatehouse.domain.model.common import DomainModel
from gatehouse.domain.model.user import utcnow
from gatehouse.domain.value import OrgId, Slug, UserId


class Organization(DomainModel):
    """Tenant organization.

    ``member_count`` is only ever adjusted inside the batch that creates a
    member's user record; it is never recomputed by scanning users.
    """

    id: OrgId
    name: str = Field(min_length=1, max_length=200)
    slug: Slug
    created_by: UserId
    created_at: datetime = Field(default_factory=utcnow)
    member_count: int = Field(default=0, ge=0)
