"""Unit tests for Telegram webhook use case."""

import unittest
from unittest import IsolatedAsyncioTestCase
from unittest.mock import AsyncMock, MagicMock, patch

from weekly_schedule_bot.use_cases.webhooks.telegram_webhook_use_case import TelegramWebhookUseCase


class TestTelegramWebhookUseCase(IsolatedAsyncioTestCase):
    """Test suite for TelegramWebhookUseCase."""

    def setUp(self):
        self.application = MagicMock()
        self.application.process_update = AsyncMock()
        self.use_case = TelegramWebhookUseCase(self.application)

    async def test_a_invalid_update_data(self):
        with patch("telegram.Update.de_json", return_value=None):
            result = await self.use_case.process_update({})

        self.assertEqual(result.status, "error")
        self.assertEqual(result.message, "Invalid update data")
        self.application.process_update.assert_not_awaited()

    async def test_a_message_is_dispatched(self):
        update = MagicMock(update_id=77, callback_query=None)

        with patch("telegram.Update.de_json", return_value=update):
            result = await self.use_case.process_update({"update_id": 77})

        self.application.process_update.assert_awaited_once_with(update)
        self.assertEqual(result.status, "success")
        self.assertEqual(result.message, "Processed update 77")

    async def test_a_callback_query_is_dispatched(self):
        update = MagicMock(update_id=78, message=None)

        with patch("telegram.Update.de_json", return_value=update):
            result = await self.use_case.process_update({"update_id": 78})

        self.assertEqual(result.status, "success")

    async def test_a_unsupported_update_is_ignored(self):
        update = MagicMock(update_id=79, message=None, callback_query=None)

        with patch("telegram.Update.de_json", return_value=update):
            result = await self.use_case.process_update({"update_id": 79})

        self.assertEqual(result.status, "ignored")
        self.application.process_update.assert_not_awaited()

    async def test_a_handler_failure_is_reported(self):
        self.application.process_update.side_effect = Exception("boom")
        update = MagicMock(update_id=80, callback_query=None)

        with patch("telegram.Update.de_json", return_value=update):
            result = await self.use_case.process_update({"update_id": 80})

        self.assertEqual(result.status, "error")
        self.assertEqual(result.message, "Error: boom")


if __name__ == "__main__":
    unittest.main()
