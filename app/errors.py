"""
Error types raised by the account flows and the handlers that render them.

Every error carries the exact JSON body returned to the client, since the
shape differs between endpoints.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    status_code = 500

    def __init__(self, body: dict, status_code: int | None = None):
        self.body = body
        if status_code is not None:
            self.status_code = status_code
        super().__init__(body.get("error"))


class ValidationError(GatewayError):
    """A required field is missing or empty."""

    status_code = 400

    def __init__(self, message: str, missing: list[str] | None = None):
        self.missing = missing or []
        super().__init__({"error": message})


class AuthProviderError(GatewayError):
    """Supabase Auth rejected a sign-up or sign-in."""

    status_code = 400


class StoreError(GatewayError):
    """The profile table rejected an insert."""

    status_code = 400


class NotFoundError(GatewayError):
    status_code = 404


class InternalError(GatewayError):
    status_code = 500


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    if exc.status_code < 500:
        detail = str(exc)
        if isinstance(exc, ValidationError) and exc.missing:
            detail = f"{detail} missing={exc.missing}"
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, detail)
    return JSONResponse(status_code=exc.status_code, content=exc.body)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s -> malformed body: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything raised outside a handler's own try block, e.g. while resolving dependencies."""
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
