"""Health check API endpoint for Mastermind TV"""

import logging
import platform
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Request

from mastermindtv import __version__

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


def cache_status(request: Request) -> dict[str, Any]:
    """Describe the channel cache without triggering a refresh."""
    cache = request.app.state.cache
    snapshot = cache.snapshot

    status: dict[str, Any] = {
        "ttl_seconds": cache.ttl,
        "fresh": cache.is_fresh(),
        "channel_count": None,
        "age_seconds": None,
        "stats": cache.stats.to_dict(),
    }
    if snapshot is not None:
        status["channel_count"] = len(snapshot.records)
        status["age_seconds"] = round(cache.snapshot_age(), 1)
    return status


@router.get("")
async def health_check(request: Request) -> dict[str, Any]:
    """
    Basic health check endpoint.

    Returns:
        dict: Health status including channel cache state
    """
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.utcnow().isoformat(),
        "python_version": platform.python_version(),
        "cache": cache_status(request),
    }


@router.get("/live")
async def liveness_check() -> dict[str, str]:
    """
    Kubernetes-style liveness probe.

    Returns:
        dict: Liveness status
    """
    return {"status": "alive"}
