"""
FastAPI dependencies - request body reader, services and deadline (SOLID: Dependency Inversion).
Challenge: Reusable body read, consistent error responses.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from starlette.requests import ClientDisconnect

from transform_api.config import get_settings
from transform_api.core.deadline import Deadline
from transform_api.core.errors import RequestShapeError
from transform_api.services.image_service import ImageConversionService
from transform_api.services.record_service import RecordEnrichmentService

logger = logging.getLogger(__name__)


async def read_post_body(request: Request) -> bytes:
    """Log the call, then read the whole body."""
    path = request.url.path
    logger.info(
        "Received request: %s", path,
        extra={"endpoint": path, "method": request.method},
    )
    try:
        return await request.body()
    except ClientDisconnect as exc:
        raise RequestShapeError(
            str(exc) or "Request body could not be read: client disconnected"
        ) from exc


def get_record_service() -> RecordEnrichmentService:
    return RecordEnrichmentService(get_settings().timezone_name)


def get_image_service() -> ImageConversionService:
    return ImageConversionService(get_settings().image_bound)


def get_deadline() -> Deadline | None:
    """Fresh deadline per request, or None when no timeout is configured."""
    return Deadline.from_timeout(get_settings().request_timeout_seconds)


PostBody = Annotated[bytes, Depends(read_post_body)]
RecordService = Annotated[RecordEnrichmentService, Depends(get_record_service)]
ImageService = Annotated[ImageConversionService, Depends(get_image_service)]
RequestDeadline = Annotated[Deadline | None, Depends(get_deadline)]
