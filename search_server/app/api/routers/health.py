from fastapi import APIRouter
from search_server.app.platform.config import settings

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
def health():
    return {"ok": True, "app": settings.APP_NAME}
