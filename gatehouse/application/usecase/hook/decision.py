"""Decision returned by the blocking lifecycle hooks."""

from typing import Any

from pydantic import BaseModel

from gatehouse.domain.model import ClaimsSet, to_custom_claims


class HookDecision(BaseModel):
    """Approval returned by a blocking hook.

    Rejections are raised, never returned. ``claims`` is None when the hook
    approves without asserting any authority.
    """

    claims: ClaimsSet | None = None

    @property
    def custom_claims(self) -> dict[str, Any]:
        """Claims as the raw bag attached to the identity."""
        return to_custom_claims(self.claims)
