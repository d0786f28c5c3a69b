"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class IdentityProviderError(ProviderError):
    """Identity provider request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
