"""Telegram webhook endpoint."""

from __future__ import annotations

import hmac
from typing import Optional

from fastapi import APIRouter, Header, Request, status
from fastapi.responses import JSONResponse

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.api_schemas import WebhookResponse
from weekly_schedule_bot.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from weekly_schedule_bot.use_cases.webhooks import TelegramWebhookUseCase
from weekly_schedule_bot.utils.exceptions import CustomHTTPException


class TelegramWebhookEndpoint(ServiceAPIEndpointBluePrint):
    """API endpoint for handling Telegram webhook events."""

    def __init__(
        self,
        telegram_webhook_use_case: TelegramWebhookUseCase,
        secret_token: Optional[str] = None,
    ):
        """Initialize the endpoint.

        Args:
            telegram_webhook_use_case: Use case for handling Telegram webhooks
            secret_token: Expected X-Telegram-Bot-Api-Secret-Token, if any
        """
        self.telegram_webhook_use_case = telegram_webhook_use_case
        self.secret_token = secret_token

    def _check_secret(self, received: Optional[str]) -> None:
        if not self.secret_token:
            return
        if received is None or not hmac.compare_digest(received, self.secret_token):
            LOGGER.warning("Rejected Telegram webhook call with a wrong secret token")
            raise CustomHTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                message={"error": "invalid secret token"},
            )

    def create_rest_api_route(self) -> APIRouter:
        """Create and configure the API router for Telegram webhooks.

        Returns:
            Configured APIRouter for Telegram webhook endpoints
        """
        api_route = APIRouter(
            prefix="/webhook/telegram",
            tags=["Webhooks"]
        )

        @api_route.post(
            "/",
            summary="Handle Telegram webhook events",
            description="Receives and processes Telegram webhook events",
            response_model=WebhookResponse
        )
        async def telegram_webhook(
            request: Request,
            x_telegram_bot_api_secret_token: Optional[str] = Header(default=None),
        ):
            self._check_secret(x_telegram_bot_api_secret_token)
            try:
                update_data = await request.json()
                LOGGER.debug(f"Received Telegram update: {update_data}")

                result = await self.telegram_webhook_use_case.process_update(update_data)
                return JSONResponse(content=result.model_dump())

            except Exception as e:
                LOGGER.error(f"Error handling Telegram webhook: {str(e)}", exc_info=True)
                return JSONResponse(
                    content=WebhookResponse(
                        status="error",
                        message=f"Error: {str(e)}"
                    ).model_dump(),
                    status_code=500
                )

        return api_route
