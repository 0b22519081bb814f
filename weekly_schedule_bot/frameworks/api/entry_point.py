"""FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.app_container import create_telegram_application
from weekly_schedule_bot.app_container import get_container
from weekly_schedule_bot.app_container import shutdown
from weekly_schedule_bot.app_container import startup
from weekly_schedule_bot.frameworks.api.configs import fastapi_information
from weekly_schedule_bot.frameworks.api.configs import fastapi_tags_metadata
from weekly_schedule_bot.frameworks.api.registry import SubServiceEndpoints


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifecycle manager for the FastAPI application.

    Args:
        app: FastAPI application instance

    Yields:
        None when setup is complete
    """
    LOGGER.info("Starting API server...")
    startup()
    application = create_telegram_application()
    await application.initialize()
    await application.start()
    yield
    LOGGER.info("Shutting down API server...")
    await shutdown()


app = FastAPI(
    **fastapi_information,
    openapi_tags=fastapi_tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for endpoint in get_container()[SubServiceEndpoints].endpoints:
    LOGGER.info(f"Mounting routes of {endpoint.__class__.__name__}")
    app.include_router(endpoint.create_rest_api_route())
