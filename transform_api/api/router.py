"""
API router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from transform_api.api.endpoints import health, images, records

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(records.router, tags=["records"])
api_router.include_router(images.router, tags=["images"])
