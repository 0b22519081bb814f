"""Unit tests for TelegramWebhookEndpoint."""

import unittest
from unittest.mock import AsyncMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from weekly_schedule_bot.entities.api_schemas import WebhookResponse
from weekly_schedule_bot.frameworks.api.endpoints.telegram_webhook import TelegramWebhookEndpoint
from weekly_schedule_bot.use_cases.webhooks.telegram_webhook_use_case import TelegramWebhookUseCase

UPDATE_DATA = {
    "update_id": 123456789,
    "message": {
        "message_id": 42,
        "date": 1739000000,
        "chat": {"id": 123456789, "type": "private"},
        "text": "/week",
        "from": {"id": 123456789, "is_bot": False, "first_name": "Test"},
    },
}


class TestTelegramWebhookEndpoint(unittest.TestCase):
    """Test suite for TelegramWebhookEndpoint."""

    def setUp(self):
        self.telegram_webhook_use_case = AsyncMock(spec=TelegramWebhookUseCase)
        self.telegram_webhook_use_case.process_update.return_value = WebhookResponse(
            status="success",
            message="Processed update 123456789",
        )

    def _client(self, secret_token=None) -> TestClient:
        endpoint = TelegramWebhookEndpoint(
            telegram_webhook_use_case=self.telegram_webhook_use_case,
            secret_token=secret_token,
        )
        app = FastAPI()
        app.include_router(endpoint.create_rest_api_route())
        return TestClient(app)

    def test_create_rest_api_route(self):
        router = TelegramWebhookEndpoint(self.telegram_webhook_use_case).create_rest_api_route()

        self.assertEqual(router.prefix, "/webhook/telegram")
        self.assertEqual(router.tags, ["Webhooks"])

    def test_telegram_webhook_endpoint_success(self):
        response = self._client().post("/webhook/telegram/", json=UPDATE_DATA)

        self.telegram_webhook_use_case.process_update.assert_called_once_with(UPDATE_DATA)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"status": "success", "message": "Processed update 123456789"},
        )

    def test_telegram_webhook_endpoint_exception(self):
        self.telegram_webhook_use_case.process_update.side_effect = Exception("Test exception")

        response = self._client().post("/webhook/telegram/", json=UPDATE_DATA)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(),
            {"status": "error", "message": "Error: Test exception"},
        )

    def test_secret_token_is_required_when_configured(self):
        client = self._client(secret_token="s3cret")

        missing = client.post("/webhook/telegram/", json=UPDATE_DATA)
        wrong = client.post(
            "/webhook/telegram/",
            json=UPDATE_DATA,
            headers={"X-Telegram-Bot-Api-Secret-Token": "guess"},
        )
        accepted = client.post(
            "/webhook/telegram/",
            json=UPDATE_DATA,
            headers={"X-Telegram-Bot-Api-Secret-Token": "s3cret"},
        )

        self.assertEqual(missing.status_code, 403)
        self.assertEqual(wrong.status_code, 403)
        self.assertEqual(accepted.status_code, 200)
        self.telegram_webhook_use_case.process_update.assert_called_once_with(UPDATE_DATA)


if __name__ == "__main__":
    unittest.main()
