"""
Boundary translation of failures into HTTP responses.

- Not-found failures become their status code with an empty body.
- Validation failures and conflicts become a structured JSON payload.
- Anything else becomes a generic 500 without internal details.
"""
import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.core.exceptions import ErrorKind, StorefrontError

logger = logging.getLogger(__name__)

EMPTY_BODY_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_204_NO_CONTENT}


def error_payload(status_code: int, error: str, message: str, errors=None) -> dict:
    """Build the structured error body shared by every non-empty failure."""
    return {
        "status": status_code,
        "error": error,
        "message": message,
        "errors": errors or [],
    }


async def storefront_error_handler(request: Request, exc: StorefrontError) -> Response:
    status_code = exc.status_code
    logger.warning(
        "%s %s failed with %s (%s): %s",
        request.method,
        request.url.path,
        exc.kind.value,
        status_code,
        exc.message,
    )
    if status_code in EMPTY_BODY_STATUSES:
        return Response(status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content=error_payload(status_code, exc.kind.value, exc.message, exc.errors),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    logger.warning(
        "%s %s rejected with %d validation errors",
        request.method,
        request.url.path,
        len(errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_payload(
            status.HTTP_400_BAD_REQUEST,
            ErrorKind.VALIDATION_FAILURE.value,
            "Request validation failed",
            errors,
        ),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            "Internal server error",
        ),
    )


EXCEPTION_HANDLERS = {
    StorefrontError: storefront_error_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: unhandled_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
