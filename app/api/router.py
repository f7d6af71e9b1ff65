from fastapi import APIRouter

from app.api.endpoints.health import router as health_router
from app.api.endpoints.resources import router as resources_router
from app.api.endpoints.listings import router as listings_router
from app.api.endpoints.applications import router as applications_router


router = APIRouter(prefix="/api")
router.include_router(health_router, tags=["health"])
router.include_router(resources_router, tags=["resources"])
router.include_router(listings_router, tags=["listings"])
router.include_router(applications_router, tags=["applications"])
