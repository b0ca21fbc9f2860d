"""
RevRoast Service - Main Application

A FastAPI backend that sends a SaaS landing-page URL to an OpenRouter
chat-completion model for a brutally honest critique and returns it as
score, good, confusing and improvements buckets.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from config import Settings, get_settings
from errors import register_error_handlers
from routes import router
from utils.openrouter_client import RoastGateway

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    created = app.state.gateway is None
    if created:
        app.state.gateway = RoastGateway(app.state.settings)
    try:
        yield
    finally:
        if created:
            await app.state.gateway.aclose()
            app.state.gateway = None


def create_app(
    settings: Optional[Settings] = None, gateway: Optional[RoastGateway] = None
) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if not settings.OPENROUTER_API_KEY and not settings.ROAST_MOCK_MODE:
        logger.warning("⚠️ OPENROUTER_API_KEY is not set; upstream calls will be rejected")

    # Initialize FastAPI app
    app = FastAPI(title="RevRoast Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = gateway

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, timeout_keep_alive=60)
