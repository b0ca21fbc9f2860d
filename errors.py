"""
Error kinds for the roast endpoint and the FastAPI handlers that flatten
them into {"error": message} responses.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class RoastError(Exception):
    """Base class for failures reported to the caller"""

    status_code = 500
    message = "roast failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InputError(RoastError):
    """Malformed or missing URL in the inbound body"""

    status_code = 400
    message = "invalid request body"


class UpstreamError(RoastError):
    """Network failure, non-2xx status or unexpected payload from the completion API"""

    status_code = 500
    message = "AI roast failed"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def roast_error_handler(request: Request, exc: RoastError) -> JSONResponse:
    logger.error(f"❌ {request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"⚠️ Rejected body on {request.url.path}: {exc.errors()}")
    return error_response(InputError.status_code, InputError.message)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Body decoding failures surface as a bare 400 before validation runs
    if exc.status_code == InputError.status_code:
        logger.warning(f"⚠️ Unreadable body on {request.url.path}: {exc.detail}")
        return error_response(InputError.status_code, InputError.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RoastError, roast_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
