"""Interface layer error handling.

Every failure leaves the API as ``{"success": false, "error": ...}``.
Domain errors map to a status code here, form errors additionally set
``isFormError`` so the client can show them next to the form.
"""

import traceback

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from newsboard.config import Settings
from newsboard.domain.error import (
    DomainError,
    EmptyPostError,
    FormError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
    UsernameTakenError,
)

ERROR_STATUS: dict[type[DomainError], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UsernameTakenError: status.HTTP_409_CONFLICT,
    EmptyPostError: status.HTTP_400_BAD_REQUEST,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error, walking up its class hierarchy."""
    for cls in type(error).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return status.HTTP_400_BAD_REQUEST


def error_response(
    status_code: int, error: object, is_form_error: bool = False
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "isFormError": is_form_error},
    )


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the exception handlers that produce failure envelopes.

    Args:
        app: FastAPI application
        settings: Application settings (production hides tracebacks)
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        issues = [
            {
                "code": error["type"],
                "path": [str(part) for part in error["loc"]],
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        logfire.info("Request validation failed", path=request.url.path, issues=issues)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "error": {"name": "ValidationError", "issues": issues},
            },
        )

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        logfire.info(
            "Domain error",
            path=request.url.path,
            error=type(exc).__name__,
            status_code=status_code,
        )
        return error_response(
            status_code, str(exc), is_form_error=isinstance(exc, FormError)
        )

    @app.exception_handler(HTTPException)
    async def handle_http_exception(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception("Unhandled error", path=request.url.path)
        if settings.is_production:
            detail = "Internal Server Error"
        else:
            detail = "".join(traceback.format_exception(exc))
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)
