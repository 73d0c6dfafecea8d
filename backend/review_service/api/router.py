from fastapi import APIRouter

from review_service.api.health import router as health_router
from review_service.api.reviews import router as reviews_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(reviews_router)
