"""API routes for Mastermind TV"""

from fastapi import APIRouter

from .addon import router as addon_router
from .health import router as health_router

# Stremio expects the add-on resources at the root, not under a prefix
api_router = APIRouter()
api_router.include_router(addon_router)
api_router.include_router(health_router)

__all__ = ["api_router"]
