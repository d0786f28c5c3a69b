"""Identity as held by the external identity provider."""

from typing import Any

from pydantic import Field

from gatehouse.domain.model.common import DomainModel
from gatehouse.domain.value import UserId


class Identity(DomainModel):
    """Provider-owned identity.

    ``custom_claims`` is the raw bag attached by the provider; parse it with
    ``parse_optional_claims`` before trusting it.
    """

    uid: UserId
    email: str | None = None
    display_name: str | None = None
    photo_url: str | None = None
    custom_claims: dict[str, Any] = Field(default_factory=dict)
    disabled: bool = False
