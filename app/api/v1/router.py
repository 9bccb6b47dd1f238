"""
API v1 Router - Main Entry Point
Aggregates all v1 API endpoints for the hotel room service
"""
from fastapi import APIRouter

from app.api.v1 import rooms
from app.config.settings import settings

# Create main API v1 router with proper configuration
router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        500: {"description": "Internal Server Error"}
    }
)

router.include_router(rooms.router)


# Health and diagnostic endpoints
@router.get("/health", tags=["System Health"])
async def api_health_check():
    """
    API health check
    """
    return {
        "status": "healthy",
        "version": settings.API_VERSION,
        "api_version": "v1",
    }
