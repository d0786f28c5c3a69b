"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings cannot be used in the current environment."""

    pass
