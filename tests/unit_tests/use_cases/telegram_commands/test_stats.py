"""Tests for the admin /stats command."""

import unittest
from datetime import date
from unittest import IsolatedAsyncioTestCase
from unittest.mock import AsyncMock, MagicMock

from telegram.constants import ChatType

from weekly_schedule_bot.entities.calendar import JalaliDate, ReferenceAnchor
from weekly_schedule_bot.entities.parity import Parity
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands import messages
from weekly_schedule_bot.use_cases.telegram_commands.stats import BotStats
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine

ADMIN_ID = 1001


def _make_update(user_id=ADMIN_ID, chat_type=ChatType.PRIVATE):
    update = MagicMock()
    update.callback_query = None
    update.effective_chat.type = chat_type
    update.effective_user.id = user_id
    update.effective_message.reply_text = AsyncMock()
    return update


class TestBotStats(IsolatedAsyncioTestCase):
    def setUp(self):
        engine = WeekParityEngine(ReferenceAnchor(JalaliDate(1403, 11, 20), Parity.ODD))
        engine.today = MagicMock(return_value=date(2025, 2, 8))
        self.repository = AsyncMock(spec=ScheduleRepositoryInterface)
        self.repository.count_schedules.return_value = 5
        self.use_case = BotStats(engine, self.repository, ADMIN_ID)

    def _sent_text(self, update) -> str:
        return update.effective_message.reply_text.call_args.args[0]

    async def test_a_admin_gets_stats(self):
        update = _make_update()

        await self.use_case.show_stats(update, MagicMock())

        self.assertEqual(
            self._sent_text(update),
            messages.STATS.format(status=Parity.ODD.label, schedules=5),
        )

    async def test_a_others_are_refused(self):
        for update in (
            _make_update(user_id=7),
            _make_update(chat_type=ChatType.GROUP),
        ):
            await self.use_case.show_stats(update, MagicMock())
            self.assertEqual(self._sent_text(update), messages.ADMIN_ONLY)
        self.repository.count_schedules.assert_not_awaited()

    async def test_a_no_admin_configured(self):
        use_case = BotStats(MagicMock(), self.repository)
        update = _make_update()

        await use_case.show_stats(update, MagicMock())

        self.assertEqual(self._sent_text(update), messages.ADMIN_ONLY)


if __name__ == "__main__":
    unittest.main()
