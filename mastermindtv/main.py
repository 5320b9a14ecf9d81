"""
Mastermind TV Main Application

FastAPI application serving the Stremio add-on protocol.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mastermindtv import __version__
from mastermindtv.addon import AddonHandlers, build_manifest
from mastermindtv.cache import ChannelCache, ChannelFetcher
from mastermindtv.config import MastermindConfig, get_config, load_config
from mastermindtv.integration import ChannelSource

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    The channel cache is populated lazily by the first request, so startup
    only announces where the add-on can be installed from.
    """
    config: MastermindConfig = app.state.config
    logger.info(f"Starting Mastermind TV v{__version__}")
    logger.info(f"Channel source: {config.source.url} (ttl {config.cache.ttl_seconds}s)")
    logger.info(f"Addon is running at: http://127.0.0.1:{config.server.port}/manifest.json")

    yield

    logger.info("Mastermind TV shut down")


def create_app(
    config: Optional[MastermindConfig] = None,
    source: Optional[ChannelFetcher] = None,
    clock: Callable[[], float] = time.monotonic,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Configuration to use. Defaults to the global configuration.
        source: Channel source for the cache. Defaults to the configured origin.
        clock: Time source for cache expiry.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_config()

    app = FastAPI(
        title="Mastermind TV",
        description="Stremio add-on for live TV channels",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Stremio clients load add-ons cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    if source is None:
        source = ChannelSource(config.source.url, timeout=config.source.timeout)

    cache = ChannelCache(
        source,
        ttl=config.cache.ttl_seconds,
        clock=clock,
        serve_stale_on_error=config.cache.serve_stale_on_error,
    )

    app.state.config = config
    app.state.cache = cache
    app.state.manifest = build_manifest(config.addon)
    app.state.handlers = AddonHandlers(cache, config.addon)

    from mastermindtv.api import api_router
    app.include_router(api_router)

    return app


def main() -> None:
    """
    Main entry point for running the server.

    Called when running `python -m mastermindtv` or via the CLI.
    """
    import uvicorn
    from mastermindtv.utils.logging_setup import log_system_info, parse_size, setup_logging

    config = load_config()

    setup_logging(
        log_level=config.logging.level,
        log_file_name=config.logging.file,
        log_to_console=True,
        log_to_file=config.logging.to_file,
        max_bytes=parse_size(config.logging.max_size),
        backup_count=config.logging.backup_count,
        log_format=config.logging.format,
    )
    log_system_info()

    uvicorn.run(
        "mastermindtv.main:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        reload=config.server.debug,
        log_level=config.server.log_level.lower(),
    )


if __name__ == "__main__":
    main()
