from fastapi import APIRouter

from review_service.core.config import settings

router = APIRouter()


@router.get("/health/live")
def health_live():
    return {"status": "live"}


@router.get("/health/ready")
def health_ready():
    return {"status": "ready", "service": settings.service_name}
