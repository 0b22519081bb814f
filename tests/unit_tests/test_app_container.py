"""Tests for the application container wiring."""

import os
import tempfile
import unittest
from unittest.mock import patch

from telegram.ext import Application

from weekly_schedule_bot.app_container import setup_container
from weekly_schedule_bot.frameworks.api.registry import SubServiceEndpoints
from weekly_schedule_bot.frameworks.telegram.error_handler import error
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.use_cases.webhooks import TelegramWebhookUseCase
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine


class TestAppContainer(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.env = patch.dict(
            os.environ,
            {
                "TELEGRAM_TOKEN": "123456:TEST-TOKEN",
                "STORAGE_DATA_DIR": self.temp_dir.name,
            },
        )
        self.env.start()
        self.container = setup_container()

    def tearDown(self):
        self.env.stop()
        self.temp_dir.cleanup()

    def test_core_services_are_singletons(self):
        self.assertIs(self.container[WeekParityEngine], self.container[WeekParityEngine])
        self.assertIs(
            self.container[ScheduleRepositoryInterface],
            self.container[ScheduleRepositoryInterface],
        )

    def test_telegram_application_has_every_handler(self):
        application = self.container[Application]

        self.assertEqual(len(application.handlers[0]), 16)
        self.assertIn(error, application.error_handlers)
        self.assertIs(self.container[TelegramWebhookUseCase].application, application)

    def test_endpoints_are_registered(self):
        endpoints = self.container[SubServiceEndpoints].endpoints
        self.assertEqual(
            [endpoint.__class__.__name__ for endpoint in endpoints],
            ["TelegramWebhookEndpoint", "WeekStatusEndpoint", "HealthCheckEndpoint"],
        )


if __name__ == "__main__":
    unittest.main()
