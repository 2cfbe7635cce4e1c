"""
Classified errors - one hierarchy for every way a transform request can fail.
Challenge: Same taxonomy drives logging detail and HTTP status mapping.
Design: Pipelines raise; the API error handlers log and render. The client
sees `message`, the server log also gets `detail`.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error classes surfaced in logs and metrics."""
    REQUEST_SHAPE = "request_shape"
    MALFORMED_INPUT = "malformed_input"
    INVALID_FIELD = "invalid_field"
    ENVIRONMENT = "environment"
    DEADLINE = "deadline"


class ClassifiedError(Exception):
    """Base exception for all request failures."""

    kind: ErrorKind = ErrorKind.ENVIRONMENT
    http_status: int = 500

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail or message


# --- Client errors (400) ---

class RequestShapeError(ClassifiedError):
    """Wrong HTTP method or unreadable request body."""
    kind = ErrorKind.REQUEST_SHAPE
    http_status = 400


class MalformedInput(ClassifiedError):
    """Payload does not parse as the expected format (JSON, JPEG)."""
    kind = ErrorKind.MALFORMED_INPUT
    http_status = 400


class InvalidField(ClassifiedError):
    """A parsed value violates a domain constraint."""
    kind = ErrorKind.INVALID_FIELD
    http_status = 400

    def __init__(self, field: str, message: str, detail: str | None = None):
        super().__init__(message, detail)
        self.field = field


# --- Server errors ---

GENERIC_SERVER_MESSAGE = "An unexpected error occurred while processing the request"


class EnvironmentFailure(ClassifiedError):
    """An operation that should always succeed failed (timezone data, PNG encode).

    The client only ever sees the generic message; `detail` keeps the cause.
    """
    kind = ErrorKind.ENVIRONMENT
    http_status = 500

    def __init__(self, detail: str):
        super().__init__(GENERIC_SERVER_MESSAGE, detail)


class DeadlineExceeded(ClassifiedError):
    """Request deadline passed between two pipeline steps."""
    kind = ErrorKind.DEADLINE
    http_status = 503

    def __init__(self, step: str):
        super().__init__(f"Request deadline exceeded during {step}")
        self.step = step
