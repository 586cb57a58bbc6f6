from fastapi import APIRouter, Depends

from tweetshot.core.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "app": settings.app_name}
