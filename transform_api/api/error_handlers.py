"""
Error handlers - render ClassifiedError and unexpected exceptions as plain text.
Challenge: Log full detail server side; send only the stable message to the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from transform_api.api.endpoints import images, records
from transform_api.core.errors import GENERIC_SERVER_MESSAGE, ClassifiedError, InvalidField, RequestShapeError
from transform_api.core.observability import REQUESTS_TOTAL
from transform_api.core.responses import render_error, status_line

logger = logging.getLogger(__name__)

# Routes that answer a wrong method with the 400 body instead of a 405
POST_ONLY_PATHS = frozenset({records.ENDPOINT, images.ENDPOINT})


def wrong_method_error(method: str) -> RequestShapeError:
    return RequestShapeError(f"Expected POST request method, instead received {method}")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ClassifiedError)
    async def classified_error_handler(request: Request, exc: ClassifiedError):
        path = request.url.path
        extra = {
            "endpoint": path,
            "method": request.method,
            "error_kind": exc.kind.value,
            "status_code": exc.http_status,
            "field": exc.field if isinstance(exc, InvalidField) else None,
        }
        if exc.http_status >= 500:
            logger.error("Error processing %s: %s", path, exc.detail, extra=extra, exc_info=exc)
        else:
            logger.warning("Error processing %s: %s", path, exc.detail, extra=extra)
        REQUESTS_TOTAL.labels(path, exc.kind.value).inc()
        return render_error(exc)

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        """Routing 405s on the transform routes become the plain-text 400."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and request.url.path in POST_ONLY_PATHS:
            return await classified_error_handler(request, wrong_method_error(request.method))
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc,
            extra={"endpoint": request.url.path, "status_code": 500},
            exc_info=exc,
        )
        return PlainTextResponse(
            status_line(status.HTTP_500_INTERNAL_SERVER_ERROR) + GENERIC_SERVER_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
