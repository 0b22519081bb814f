"""Tests for Telegram handler registration."""

import unittest
from unittest import IsolatedAsyncioTestCase
from unittest.mock import AsyncMock, MagicMock

from telegram import Update
from telegram.ext import CallbackQueryHandler, CommandHandler

from weekly_schedule_bot.frameworks.telegram.error_handler import error
from weekly_schedule_bot.frameworks.telegram.main_menu_handler import MainMenuHandler
from weekly_schedule_bot.frameworks.telegram.schedule_handler import ScheduleHandler
from weekly_schedule_bot.frameworks.telegram.stats_handler import StatsHandler
from weekly_schedule_bot.frameworks.telegram.teleport_handler import TeleportHandler
from weekly_schedule_bot.frameworks.telegram.week_status_handler import WeekStatusHandler
from weekly_schedule_bot.use_cases.telegram_commands import messages


def _commands(handlers):
    names = set()
    for handler in handlers:
        if isinstance(handler, CommandHandler):
            names.update(handler.commands)
    return names


def _callback_patterns(handlers):
    return {
        handler.pattern.pattern
        for handler in handlers
        if isinstance(handler, CallbackQueryHandler)
    }


class TestTelegramHandlers(unittest.TestCase):
    def test_main_menu_handler(self):
        handlers = MainMenuHandler(MagicMock()).get_handlers()
        self.assertEqual(_commands(handlers), {"start", "help"})
        self.assertEqual(_callback_patterns(handlers), {"^menu:help$"})

    def test_week_status_handler(self):
        handlers = WeekStatusHandler(MagicMock()).get_handlers()
        self.assertEqual(_commands(handlers), {"week", "status", "today"})
        self.assertEqual(_callback_patterns(handlers), {"^menu:week_status$"})

    def test_teleport_handler(self):
        handlers = TeleportHandler(MagicMock()).get_handlers()
        self.assertEqual(_commands(handlers), {"teleport"})

    def test_schedule_handler(self):
        handlers = ScheduleHandler(MagicMock()).get_handlers()
        self.assertEqual(
            _commands(handlers),
            {
                "schedule",
                "add_lesson",
                "delete_lesson",
                "clear_day",
                "clear_week",
                "clear_schedule",
            },
        )
        self.assertEqual(_callback_patterns(handlers), {"^schedule:view:full$"})

    def test_stats_handler(self):
        handlers = StatsHandler(MagicMock()).get_handlers()
        self.assertEqual(_commands(handlers), {"stats"})


class TestErrorHandler(IsolatedAsyncioTestCase):
    async def test_a_user_is_told_about_the_error(self):
        update = MagicMock(spec=Update)
        update.effective_message.reply_text = AsyncMock()
        context = MagicMock()
        context.error = ValueError("boom")

        await error(update, context)

        update.effective_message.reply_text.assert_awaited_once_with(messages.ERROR_OCCURRED)

    async def test_a_error_without_update(self):
        context = MagicMock()
        context.error = ValueError("boom")

        await error(None, context)


if __name__ == "__main__":
    unittest.main()
