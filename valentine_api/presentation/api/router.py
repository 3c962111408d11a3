"""Top-level API router — mounts the record routers under /api."""

from fastapi import APIRouter

from valentine_api.presentation.api.endpoints.valentines import router as valentines_router
from valentine_api.presentation.api.endpoints.ecards import router as ecards_router

router = APIRouter(prefix="/api")
router.include_router(valentines_router)
router.include_router(ecards_router)
