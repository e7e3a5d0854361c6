"""FastAPI application for the dumbdown service."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dumbdown.exceptions import ConversionError, InvalidInputError
from dumbdown.utils.logging_config import configure_logging, get_logger
from server.models import ErrorResponse
from server.routers.convert import router as convert_router
from server.server_config import CORS_ORIGINS, GZIP_MINIMUM_SIZE

logger = get_logger(__name__)

_USAGE_MESSAGES = {
    "/convert-markdown": 'Please provide markdown text in the request body as { markdown: "..." }',
}
_DEFAULT_USAGE_MESSAGE = 'Please provide HTML text in the request body as { text: "..." }'
_NOT_FOUND_MESSAGE = "Endpoint not found. Try POST /convert or GET /health"


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump(),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request", extra={"path": request.url.path, "errors": len(exc.errors())})
    message = _USAGE_MESSAGES.get(request.url.path, _DEFAULT_USAGE_MESSAGE)
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", message)


async def _invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning("Invalid input", extra={"path": request.url.path, "error": str(exc)})
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", str(exc))


async def _conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
    logger.error("Conversion failed", extra={"path": request.url.path, "error": str(exc)})
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Conversion failed", str(exc))


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(exc.status_code, "Not found", _NOT_FOUND_MESSAGE)
    return _error_response(exc.status_code, "Server error", str(exc.detail))


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, routes and error mapping."""
    configure_logging()
    application = FastAPI(
        title="dumbdown",
        description="Convert HTML and Markdown into plain-text Dumbdown.",
    )
    application.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    application.include_router(convert_router)

    application.add_exception_handler(RequestValidationError, _validation_error_handler)
    application.add_exception_handler(InvalidInputError, _invalid_input_handler)
    application.add_exception_handler(ConversionError, _conversion_error_handler)
    application.add_exception_handler(StarletteHTTPException, _http_error_handler)
    return application


app = create_app()
