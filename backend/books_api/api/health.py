"""Health check route."""
from fastapi import APIRouter, Depends

from books_api.config import Settings
from books_api.dependencies import get_app_settings
from books_api.schemas.common import StatusResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=StatusResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}
