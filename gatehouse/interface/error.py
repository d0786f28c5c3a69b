"""Interface layer errors."""

from fastapi import HTTPException, status

from gatehouse.domain.error import (
    ConflictError,
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error raised by a CRUD use case into an HTTP error.

    Args:
        error: Domain error raised by the use case

    Returns:
        HTTPException carrying the matching status code
    """
    if isinstance(error, (ValidationError, InvalidArgumentError)):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, PermissionDeniedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(error))
