"""
Record enrichment endpoint - POST /json.
Design: Thin controller; RecordEnrichmentService holds the business logic.
"""

from fastapi import APIRouter, Response
from starlette.concurrency import run_in_threadpool

from transform_api.core.dependencies import PostBody, RecordService, RequestDeadline
from transform_api.core.observability import REQUEST_DURATION, REQUESTS_TOTAL
from transform_api.core.responses import render_json

router = APIRouter()

ENDPOINT = "/json"


@router.post(ENDPOINT)
async def post_json(body: PostBody, service: RecordService, deadline: RequestDeadline) -> Response:
    """Validate a JSON array of user records and return the enriched array."""
    with REQUEST_DURATION.labels(ENDPOINT).time():
        result = await run_in_threadpool(service.process, body, deadline)
    REQUESTS_TOTAL.labels(ENDPOINT, "ok").inc()
    return render_json(result)
