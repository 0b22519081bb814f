"""Use case for handling Telegram webhook events."""

from __future__ import annotations

from typing import Dict, Any

from telegram import Update
from telegram.ext import Application

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.api_schemas import WebhookResponse


class TelegramWebhookUseCase:
    """Use case for processing Telegram webhook events.

    Updates pushed by Telegram are handed to the same handler set the
    polling runner uses, so both modes answer identically.
    """

    def __init__(self, application: Application):
        """Initialize the use case.

        Args:
            application: Initialized Telegram application holding the handlers
        """
        self.application = application

    async def process_update(self, update_data: Dict[str, Any]) -> WebhookResponse:
        """Process a Telegram update event.

        Args:
            update_data: The update payload from Telegram

        Returns:
            Response with status and message
        """
        try:
            update = Update.de_json(update_data, self.application.bot)

            if not update:
                return WebhookResponse(status="error", message="Invalid update data")

            if not (update.message or update.callback_query):
                return WebhookResponse(status="ignored", message="Unsupported update type")

            await self.application.process_update(update)
            return WebhookResponse(
                status="success",
                message=f"Processed update {update.update_id}",
            )

        except Exception as e:
            LOGGER.error(f"Error processing Telegram update: {str(e)}", exc_info=True)
            return WebhookResponse(status="error", message=f"Error: {str(e)}")
