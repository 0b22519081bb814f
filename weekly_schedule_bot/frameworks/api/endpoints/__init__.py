"""API endpoints package."""

__all__ = [
    "TelegramWebhookEndpoint",
    "HealthCheckEndpoint",
    "WeekStatusEndpoint",
]

from weekly_schedule_bot.frameworks.api.endpoints.telegram_webhook import TelegramWebhookEndpoint
from weekly_schedule_bot.frameworks.api.endpoints.health_check import HealthCheckEndpoint
from weekly_schedule_bot.frameworks.api.endpoints.week_status import WeekStatusEndpoint
