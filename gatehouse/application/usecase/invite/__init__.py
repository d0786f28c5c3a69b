"""Invite use cases."""

from gatehouse.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from gatehouse.application.usecase.invite.list_invites import (
    InviteItem,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)

__all__ = [
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "InviteItem",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
]
