"""
Image conversion endpoint - POST /jpeg-to-png.
Challenge: CPU-bound decode/resize/encode must not block the event loop.
"""

from fastapi import APIRouter, Response
from starlette.concurrency import run_in_threadpool

from transform_api.core.dependencies import ImageService, PostBody, RequestDeadline
from transform_api.core.observability import REQUEST_DURATION, REQUESTS_TOTAL
from transform_api.core.responses import render_png

router = APIRouter()

ENDPOINT = "/jpeg-to-png"


@router.post(ENDPOINT)
async def post_jpeg_to_png(body: PostBody, service: ImageService, deadline: RequestDeadline) -> Response:
    """Convert a JPEG body to a PNG fitted into the configured bounding box."""
    with REQUEST_DURATION.labels(ENDPOINT).time():
        result = await run_in_threadpool(service.process, body, deadline)
    REQUESTS_TOTAL.labels(ENDPOINT, "ok").inc()
    return render_png(result)
