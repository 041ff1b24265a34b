"""
System routes: health probe, robots.txt and the public constants.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.config import get_app_url, settings
from app.constants import APP_CONFIG, ROUTES
from app.services.robots_service import build_robots_txt

router = APIRouter(tags=["System"])


@router.get("/health")
async def health():
    return {"status": "healthy"}


@router.get("/api/robots", response_class=PlainTextResponse)
@router.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
def robots(base_url: str = Depends(get_app_url)):
    # Explicit Content-Type keeps Starlette from appending a charset.
    return PlainTextResponse(
        build_robots_txt(base_url),
        headers={
            "Content-Type": "text/plain",
            "Cache-Control": settings.robots_cache_control,
        },
    )


@router.get("/api/config")
def public_config():
    """Expose the application constants and route table to the frontend."""
    return {
        "app": APP_CONFIG.model_dump(by_alias=True),
        "routes": ROUTES.model_dump(by_alias=True),
    }
