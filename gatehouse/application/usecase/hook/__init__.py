"""Lifecycle hook use cases."""

from gatehouse.application.usecase.hook.after_create import (
    AfterCreateRequest,
    AfterCreateResponse,
    AfterCreateUseCase,
    MaterializationOutcome,
)
from gatehouse.application.usecase.hook.before_create import (
    BeforeCreateRequest,
    BeforeCreateUseCase,
)
from gatehouse.application.usecase.hook.before_sign_in import (
    BeforeSignInRequest,
    BeforeSignInUseCase,
)
from gatehouse.application.usecase.hook.decision import HookDecision

__all__ = [
    "AfterCreateRequest",
    "AfterCreateResponse",
    "AfterCreateUseCase",
    "BeforeCreateRequest",
    "BeforeCreateUseCase",
    "BeforeSignInRequest",
    "BeforeSignInUseCase",
    "HookDecision",
    "MaterializationOutcome",
]
