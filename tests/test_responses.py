"""
Response formatter tests - status lines and error bodies per error class.
"""

import pytest

from transform_api.core.errors import (
    DeadlineExceeded,
    EnvironmentFailure,
    ErrorKind,
    InvalidField,
    MalformedInput,
    RequestShapeError,
)
from transform_api.core.responses import render_error, render_json, render_png, status_line


def test_status_line():
    assert status_line(400) == "400 Bad Request\n"
    assert status_line(500) == "500 Internal Server Error\n"


@pytest.mark.parametrize("exc, status, body", [
    (RequestShapeError("Body read error"), 400, "400 Bad Request\nBody read error"),
    (MalformedInput("unexpected end of input"), 400, "400 Bad Request\nunexpected end of input"),
    (InvalidField("name", "bad name"), 400, "400 Bad Request\nbad name"),
    (
        EnvironmentFailure("zoneinfo missing"),
        500,
        "500 Internal Server Error\nAn unexpected error occurred while processing the request",
    ),
    (DeadlineExceeded("PNG encode"), 503, "503 Service Unavailable\nRequest deadline exceeded during PNG encode"),
])
def test_render_error(exc, status, body):
    response = render_error(exc)
    assert response.status_code == status
    assert response.media_type == "text/plain"
    assert response.body.decode() == body


def test_environment_failure_keeps_detail_out_of_body():
    exc = EnvironmentFailure("Error loading timezone 'X': not found")
    assert exc.kind is ErrorKind.ENVIRONMENT
    assert "not found" not in render_error(exc).body.decode()
    assert exc.detail == "Error loading timezone 'X': not found"


def test_render_success_media_types():
    assert render_json(b"[]").media_type == "application/json"
    assert render_png(b"\x89PNG").media_type == "image/png"
    assert render_png(b"\x89PNG").status_code == 200
