"""
Response formatter - maps a pipeline outcome to status, content type and body.
Challenge: Stable, literal error bodies that clients and tests can match exactly.
"""

from http import HTTPStatus

from fastapi import Response
from fastapi.responses import PlainTextResponse

from transform_api.core.errors import ClassifiedError

JSON_MEDIA_TYPE = "application/json"
PNG_MEDIA_TYPE = "image/png"


def status_line(status: int) -> str:
    """'400 Bad Request\\n' style prefix for plain-text error bodies."""
    code = HTTPStatus(status)
    return f"{code.value} {code.phrase}\n"


# Computed once at import; read-only afterwards
_STATUS_PREFIXES = {
    status: status_line(status)
    for status in (HTTPStatus.BAD_REQUEST, HTTPStatus.INTERNAL_SERVER_ERROR, HTTPStatus.SERVICE_UNAVAILABLE)
}


def error_body(exc: ClassifiedError) -> str:
    prefix = _STATUS_PREFIXES.get(exc.http_status) or status_line(exc.http_status)
    return prefix + exc.message


def render_json(body: bytes) -> Response:
    return Response(content=body, media_type=JSON_MEDIA_TYPE)


def render_png(body: bytes) -> Response:
    return Response(content=body, media_type=PNG_MEDIA_TYPE)


def render_error(exc: ClassifiedError) -> PlainTextResponse:
    """Plain-text body: status line, newline, client-facing message."""
    return PlainTextResponse(error_body(exc), status_code=exc.http_status)
