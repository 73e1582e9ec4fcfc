"""
HTTP error rendering.

Error responses carry a status code only, no body. Request bodies or query
parameters that cannot be decoded are reported as 400 rather than FastAPI's
default 422.
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    return Response(status_code=exc.status_code, headers=exc.headers)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    logger.info(
        "Rejected undecodable request %s %s: %d error(s)",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]
