"""FastAPI configuration settings."""

from __future__ import annotations

from typing import Dict, List, Any

from weekly_schedule_bot import __version__

# API version prefix
api_prefix: str = "/api/v1"

# FastAPI information dictionary
fastapi_information: Dict[str, Any] = {
    "title": "Weekly Schedule Bot API",
    "description": "Webhook receiver and week parity API of the weekly schedule bot",
    "version": __version__,
    "openapi_url": f"{api_prefix}/openapi.json",
    "docs_url": f"{api_prefix}/docs",
    "redoc_url": f"{api_prefix}/redoc",
}

# FastAPI tags metadata for API documentation
fastapi_tags_metadata: List[Dict[str, str]] = [
    {
        "name": "Webhooks",
        "description": "Endpoint receiving Telegram updates",
    },
    {
        "name": "Week",
        "description": "Odd/even week status",
    },
    {
        "name": "Health",
        "description": "Health check endpoints for monitoring service status",
    },
]
