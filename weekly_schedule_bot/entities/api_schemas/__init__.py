"""API schema models package."""

__all__ = ["WebhookResponse", "WeekStatusResponse"]

from weekly_schedule_bot.entities.api_schemas.webhook_schemas import (
    WebhookResponse,
    WeekStatusResponse,
)
