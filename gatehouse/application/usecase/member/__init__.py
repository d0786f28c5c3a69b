"""Member administration use cases."""

from gatehouse.application.usecase.member.update_member_role import (
    UpdateMemberRoleRequest,
    UpdateMemberRoleResponse,
    UpdateMemberRoleUseCase,
)

__all__ = [
    "UpdateMemberRoleRequest",
    "UpdateMemberRoleResponse",
    "UpdateMemberRoleUseCase",
]
