"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from storyquest.api.game import new_session
from storyquest.api.game import router as game_router
from storyquest.api.health import router as health_router
from storyquest.config import settings
from storyquest.core.logging import get_logger, setup_logging

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing game session (scenario=%s)...", settings.SCENARIO)
    app.state.session = new_session(settings.SCENARIO, settings.SAVE_FILE)
    logger.info("Game session initialized.")

    yield

    logger.info("Shutting down...")
    app.state.session = None


app = FastAPI(title="StoryQuest", lifespan=lifespan)

app.include_router(health_router)
app.include_router(game_router)
