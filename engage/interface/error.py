"""Translation of domain errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from engage.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
    ValidationError,
)


def http_error(error: DomainError, failure: str) -> HTTPException:
    """Build the HTTPException reported for a domain error.

    Args:
        error: The domain error raised by a use case
        failure: Message reported for storage failures, whose details
            are not exposed to clients

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, StorageError):
        logfire.error(failure, error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure
    )
