"""Administrative use cases."""

from gatehouse.application.usecase.admin.bootstrap_super_admin import (
    BootstrapSuperAdminRequest,
    BootstrapSuperAdminResponse,
    BootstrapSuperAdminUseCase,
)

__all__ = [
    "BootstrapSuperAdminRequest",
    "BootstrapSuperAdminResponse",
    "BootstrapSuperAdminUseCase",
]
