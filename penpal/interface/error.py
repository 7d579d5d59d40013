"""Translation of domain and adapter errors into HTTP responses.

Routes return these responses instead of raising, so the request-scoped
session still commits whatever was written before the failure (for
example a bearer token cleared after MeWe answered 401).
"""

import logfire
from fastapi import status
from fastapi.responses import JSONResponse

from penpal.adapter.error import (
    ProviderError,
    RemoteRequestFailed,
    RemoteServiceUnconfigured,
)
from penpal.domain.error import DomainError, NotFoundError, PreconditionFailedError


def error_response(error: DomainError | ProviderError) -> JSONResponse:
    """Build the HTTP response for an expected failure.

    Args:
        error: Domain or remote service error

    Returns:
        JSON error response with a ``detail`` message
    """
    if isinstance(error, RemoteServiceUnconfigured):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        content: dict = {"detail": "MeWe integration is not configured"}
    elif isinstance(error, RemoteRequestFailed):
        status_code = status.HTTP_502_BAD_GATEWAY
        content = {
            "detail": str(error),
            "remote_status": error.status,
            "remote_body": error.body,
        }
    elif isinstance(error, ProviderError):
        status_code = status.HTTP_502_BAD_GATEWAY
        content = {"detail": str(error)}
    elif isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        content = {"detail": str(error)}
    elif isinstance(error, PreconditionFailedError):
        status_code = status.HTTP_409_CONFLICT
        content = {"detail": error.message}
    else:
        status_code = status.HTTP_400_BAD_REQUEST
        content = {"detail": str(error)}

    logfire.warn(
        "Request failed",
        error_type=type(error).__name__,
        status_code=status_code,
        error=str(error),
    )
    return JSONResponse(status_code=status_code, content=content)
