"""FastAPI application with lifespan, liveness routes, and error mapping."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from gorkbot.config import get_settings
from gorkbot.discord.client import close_client
from gorkbot.discord.router import router as interactions_router
from gorkbot.discord.setup import router as setup_router
from gorkbot.errors import InteractionError
from gorkbot.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    logger.info("Starting gorkbot (%s)", settings.environment)
    if not settings.discord_public_key:
        logger.warning("DISCORD_PUBLIC_KEY is not set; all interactions will be rejected")
    yield
    await close_client()


app = FastAPI(
    title="Gorkbot",
    lifespan=lifespan,
)
app.include_router(interactions_router)
app.include_router(setup_router)


@app.exception_handler(InteractionError)
async def interaction_error_handler(request: Request, exc: InteractionError) -> PlainTextResponse:
    """Map interaction errors to plain-text responses without internal detail."""
    if exc.status_code != 401:
        logger.info("Rejected interaction: %s", exc)
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Liveness probe."""
    return "GorkBot is running!"


@app.get("/health")
async def health():
    """Health check endpoint for hosting platforms and local development."""
    return {
        "status": "ok",
        "service": "gorkbot",
        "version": "0.1.0",
    }


def run() -> None:
    """Run the server with uvicorn (local development and container entry point)."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
