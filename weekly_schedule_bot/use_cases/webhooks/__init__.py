"""Webhook use cases package."""

__all__ = ["TelegramWebhookUseCase"]

from weekly_schedule_bot.use_cases.webhooks.telegram_webhook_use_case import (
    TelegramWebhookUseCase,
)
