"""
Translate failed use-case results into HTTP errors.

The app-level handler renders the raised ``HTTPException`` as
``{"error": detail}``.
"""

from typing import NoReturn

from fastapi import HTTPException

from application.use_cases import ErrorKind, OperationResult

STATUS_BY_KIND = {
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILED: 400,
}


def raise_for_failure(result: OperationResult) -> NoReturn:
    """
    Raise the HTTPException matching a failed result.

    Raises:
        HTTPException: 400/401/403/404 carrying the result's message
    """
    status_code = STATUS_BY_KIND.get(result.error_kind, 500)
    raise HTTPException(status_code=status_code, detail=result.error or "Request failed")
