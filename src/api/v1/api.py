from fastapi import APIRouter

from .health import router as health_router
from .items import router as items_router
from .responses import router as responses_router
from .summaries import router as summaries_router


# Public API router; the co-pilot has no authenticated surface.
api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(items_router)
api_router.include_router(responses_router)
api_router.include_router(summaries_router)
