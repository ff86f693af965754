"""Response envelope helpers and application-wide exception handlers."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from company_api.schemas.response import ApiResponse
from company_api.services.errors import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def respond(code: int, payload: Any = None, headers: dict[str, str] | None = None) -> JSONResponse:
    """Wrap a payload in the envelope and send it with a matching status."""
    envelope = ApiResponse.of(code, jsonable_encoder(payload))
    return JSONResponse(status_code=code, content=envelope.model_dump(), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return respond(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report the first validation failure as a 400."""
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "invalid request"
    return respond(status.HTTP_400_BAD_REQUEST, message)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return respond(status.HTTP_404_NOT_FOUND)


async def client_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return respond(status.HTTP_400_BAD_REQUEST, str(exc))


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Internal detail stays in the logs
    logger.exception(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
    return respond(status.HTTP_500_INTERNAL_SERVER_ERROR)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return respond(status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every handled error in the response envelope."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(AlreadyExistsError, client_error_handler)
    app.add_exception_handler(InvalidCredentialsError, client_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
