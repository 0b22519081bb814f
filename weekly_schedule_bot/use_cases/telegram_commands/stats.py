from __future__ import annotations

from typing import Optional

from telegram import Update
from telegram.ext import CallbackContext

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.constants import WEEK_STATUS_ERROR
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands import messages
from weekly_schedule_bot.use_cases.telegram_commands.common import is_private_chat
from weekly_schedule_bot.use_cases.telegram_commands.common import reply
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine
from weekly_schedule_bot.utils.exceptions import ReferenceAnchorError


class BotStats:
    """/stats for the configured admin, in a private chat only."""

    def __init__(
        self,
        week_parity_engine: WeekParityEngine,
        schedule_repository: ScheduleRepositoryInterface,
        admin_chat_id: Optional[int] = None,
    ):
        self.week_parity_engine = week_parity_engine
        self.schedule_repository = schedule_repository
        self.admin_chat_id = admin_chat_id

    def _is_admin(self, update: Update) -> bool:
        user = update.effective_user
        return (
            self.admin_chat_id is not None
            and user is not None
            and user.id == self.admin_chat_id
            and is_private_chat(update)
        )

    async def show_stats(self, update: Update, context: CallbackContext) -> None:
        if not self._is_admin(update):
            user = update.effective_user
            LOGGER.warning(f"Refused /stats for user {user.id if user else None}")
            await reply(update, messages.ADMIN_ONLY)
            return

        try:
            status = self.week_parity_engine.current_parity().label
        except ReferenceAnchorError as e:
            LOGGER.error(f"Week status unavailable: {e}")
            status = WEEK_STATUS_ERROR
        schedules = await self.schedule_repository.count_schedules()
        await reply(update, messages.STATS.format(status=status, schedules=schedules))
