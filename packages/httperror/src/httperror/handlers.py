# This project was developed with assistance from AI tools.
"""FastAPI integration: render errors as ``application/problem+json``.

Call ``install_problem_handlers(app)`` once at startup. Raised ``ProblemError``
instances, ``HTTPException``s and request validation failures are all turned
into RFC 7807 Problem Details responses.
"""

import copy
import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from .codec import DEFAULT_CODEC, Codec
from .config import settings
from .problem import ProblemError

logger = logging.getLogger(__name__)


class ProblemResponse(Response):
    """Response whose body is a serialized ProblemError."""

    def __init__(
        self,
        content: ProblemError,
        status_code: int | None = None,
        headers: Mapping[str, str] | None = None,
        codec: Codec = DEFAULT_CODEC,
    ) -> None:
        self.codec = codec
        status_code = status_code or content.status
        if not isinstance(status_code, int) or not 100 <= status_code <= 599:
            status_code = 500
        super().__init__(
            content=content,
            status_code=status_code,
            headers=headers,
            media_type=settings.MEDIA_TYPE,
        )

    def render(self, content: Any) -> bytes:
        return self.codec.encode(content)


def _status_title(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _log_problem(request: Request, problem: ProblemError) -> None:
    level = logging.ERROR if problem.status >= 500 else logging.INFO
    logger.log(
        level,
        "Problem response %s %s: %s (status=%s)",
        request.method,
        request.url.path,
        problem,
        problem.status,
    )


async def problem_error_handler(request: Request, exc: ProblemError) -> ProblemResponse:
    """Render a raised ProblemError, defaulting ``instance`` to the request path."""
    problem = exc
    if not problem.instance:
        problem = copy.copy(exc).with_instance(request.url.path)
    _log_problem(request, problem)
    return ProblemResponse(problem)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> ProblemResponse:
    """Convert HTTPException to RFC 7807 Problem Details."""
    problem = (
        ProblemError(_status_title(exc.status_code), exc.status_code, settings.DEFAULT_TYPE_URI)
        .with_detail(str(exc.detail))
        .with_instance(request.url.path)
    )
    _log_problem(request, problem)
    return ProblemResponse(problem, headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> ProblemResponse:
    """Convert request validation errors to RFC 7807 Problem Details."""
    problem = (
        ProblemError(_status_title(422), 422, settings.DEFAULT_TYPE_URI)
        .with_detail("Request validation failed.")
        .with_instance(request.url.path)
        .with_extension("errors", jsonable_encoder(exc.errors()))
    )
    _log_problem(request, problem)
    return ProblemResponse(problem)


async def unhandled_exception_handler(request: Request, exc: Exception) -> ProblemResponse:
    """Catch-all for unhandled exceptions -- log and return 500."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    detail = str(exc) if settings.EXPOSE_INTERNAL_ERRORS else "An unexpected error occurred."
    problem = (
        ProblemError(_status_title(500), 500, settings.DEFAULT_TYPE_URI)
        .with_detail(detail)
        .with_instance(request.url.path)
    )
    return ProblemResponse(problem)


def install_problem_handlers(app: FastAPI) -> None:
    """Register the Problem Details exception handlers on ``app``."""
    app.add_exception_handler(ProblemError, problem_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
