"""Mapping of exceptions to HTTP error documents."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotelsandbox.core.models import ErrorDocument
from hotelsandbox.services.book import utc_timestamp
from hotelsandbox.utils.exceptions import NoAvailabilityError, NotFoundError


def build_error(status_code: int, title: str, detail: str | None, path: str | None) -> JSONResponse:
    """Build an error response body."""
    document = ErrorDocument(
        status=status_code,
        title=title,
        detail=detail,
        error_path=path,
        timestamp=utc_timestamp(),
    )
    return JSONResponse(status_code=status_code, content=document.model_dump(by_alias=True))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.error("Resource not found: {}", exc)
    return build_error(status.HTTP_404_NOT_FOUND, "Resource not found", str(exc), request.url.path)


async def handle_no_availability(request: Request, exc: NoAvailabilityError) -> JSONResponse:
    logger.error("No availability: {}", exc)
    return build_error(status.HTTP_409_CONFLICT, "No availability", str(exc), request.url.path)


async def handle_bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    logger.error("Bad request on {}: {}", request.url.path, detail)
    return build_error(
        status.HTTP_400_BAD_REQUEST, "Invalid request parameters", detail, request.url.path
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.debug("No resource found: {}", request.url.path)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    logger.error("HTTP error on {}: {}", request.url.path, exc.detail)
    return build_error(exc.status_code, str(exc.detail), None, request.url.path)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Unexpected error on {}: {}", request.url.path, exc)
    return build_error(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc), request.url.path
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an app."""
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(NoAvailabilityError, handle_no_availability)
    app.add_exception_handler(RequestValidationError, handle_bad_request)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
