"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when a required hook input is missing."""

    def __init__(self, message: str = "Email is required."):
        super().__init__(message)


class PermissionDeniedError(DomainError):
    """Raised when an identity is not allowed to exist or sign in.

    Attributes:
        reason: Machine-readable rejection reason shown alongside the message
    """

    reason: str = "forbidden"

    def __init__(self, message: str):
        super().__init__(message)


class NotInvitedError(PermissionDeniedError):
    """Raised when no usable invitation exists for an email."""

    reason = "not_invited"

    def __init__(self) -> None:
        super().__init__("No valid invitation found for this email.")


class AccountDeactivatedError(PermissionDeniedError):
    """Raised when a member's record no longer carries a role or organization."""

    reason = "deactivated"

    def __init__(self) -> None:
        super().__init__("Your account has been deactivated. Contact an administrator.")


class ClaimsFormatError(DomainError):
    """Raised when a claims bag matches neither claims shape."""

    pass


class MaterializationError(DomainError):
    """Raised when the membership batch for a new identity fails to commit."""

    def __init__(self, user_id: str, cause: Exception):
        self.user_id = user_id
        self.cause = cause
        super().__init__(f"Failed to materialize membership for {user_id}: {cause}")


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
