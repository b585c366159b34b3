"""Application factory and context for the hookline game API.

Runtime state lives in an AppContext attached to ``app.state.context``
instead of module-level globals, so each test can build a fresh app.

Usage:
------
    # Production (settings from environment)
    app = create_app()

    # Testing (custom runner)
    app = create_app(context=AppContext(runner=GameRunner(seed=1)))
"""

import asyncio
import logging
import os
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.broadcast import start_broadcast, stop_broadcast
from backend.game_runner import GameRunner
from backend.logging_config import configure_logging
from backend.models import ServerInfo
from hookline.config.game_config import GameConfig


@dataclass
class AppContext:
    """Runtime context holding all application state."""

    runner: GameRunner = field(default_factory=lambda: GameRunner(GameConfig.from_env()))

    # Configuration
    server_id: str = field(default_factory=lambda: os.getenv("HOOKLINE_SERVER_ID", "local-server"))
    server_version: str = "1.0.0"
    production_mode: bool = field(
        default_factory=lambda: os.getenv("PRODUCTION", "false").lower() == "true"
    )
    allowed_origins: list = field(
        default_factory=lambda: os.getenv("ALLOWED_ORIGINS", "*").split(",")
    )

    # Runtime state (initialized during lifespan)
    broadcast_task: Optional[asyncio.Task] = None
    server_start_time: float = field(default_factory=time.time)
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("backend"))

    def get_server_info(self) -> ServerInfo:
        """Get information about the current server."""
        return ServerInfo(
            server_id=self.server_id,
            version=self.server_version,
            uptime_seconds=time.time() - self.server_start_time,
            frame_rate=self.runner.engine.config.frame_rate,
        )


def create_app(
    *,
    server_id: Optional[str] = None,
    production_mode: Optional[bool] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        server_id: Override server ID (default: from HOOKLINE_SERVER_ID env var)
        production_mode: Override production mode (default: from PRODUCTION env var)
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    logger = configure_logging(extra_loggers=("backend",))

    if context is None:
        context = AppContext()
    if server_id is not None:
        context.server_id = server_id
    if production_mode is not None:
        context.production_mode = production_mode
    context.logger = logger

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Start broadcasting on startup; stop the broadcast and game loop on shutdown."""
        ctx = app.state.context
        ctx.broadcast_task = start_broadcast(ctx.runner)
        ctx.logger.info("LIFESPAN: Startup complete")
        try:
            yield
        finally:
            ctx.logger.info("LIFESPAN: Shutting down")
            await stop_broadcast(ctx.broadcast_task)
            ctx.broadcast_task = None
            ctx.runner.stop()

    app = FastAPI(
        title="Hookline Fishing Game API",
        lifespan=lifespan,
        docs_url=None if context.production_mode else "/docs",
        redoc_url=None if context.production_mode else "/redoc",
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.allowed_origins if context.production_mode else ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    _setup_routers(app, context)
    return app


def _setup_routers(app: FastAPI, ctx: AppContext) -> None:
    """Setup and include all API routers."""
    from backend.routers import game, websocket

    app.include_router(game.setup_router(ctx.runner))
    app.include_router(websocket.setup_router(ctx.runner))

    @app.get("/api/server", response_model=ServerInfo)
    async def server_info():
        return ctx.get_server_info()

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    ctx.logger.info("All API routers configured successfully")
