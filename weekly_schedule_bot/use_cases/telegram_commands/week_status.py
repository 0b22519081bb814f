from __future__ import annotations

from datetime import date

from telegram import Update
from telegram.ext import CallbackContext

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.constants import ENGLISH_WEEKDAYS
from weekly_schedule_bot.entities.constants import PERSIAN_WEEKDAYS_FULL
from weekly_schedule_bot.entities.constants import WEEK_STATUS_ERROR
from weekly_schedule_bot.entities.parity import Parity
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands import messages
from weekly_schedule_bot.use_cases.telegram_commands.common import format_lessons
from weekly_schedule_bot.use_cases.telegram_commands.common import is_private_chat
from weekly_schedule_bot.use_cases.telegram_commands.common import reply
from weekly_schedule_bot.use_cases.telegram_commands.keyboards import week_status_keyboard
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine
from weekly_schedule_bot.utils.exceptions import ReferenceAnchorError
from weekly_schedule_bot.utils.jalali_calendar import format_persian_date
from weekly_schedule_bot.utils.jalali_calendar import persian_weekday_index


class WeekStatus:
    """/week, /status and /today."""

    def __init__(
        self,
        week_parity_engine: WeekParityEngine,
        schedule_repository: ScheduleRepositoryInterface,
    ):
        self.week_parity_engine = week_parity_engine
        self.schedule_repository = schedule_repository

    async def show_week_status(self, update: Update, context: CallbackContext) -> None:
        today = self.week_parity_engine.today()
        persian_date = format_persian_date(today)
        try:
            current = self.week_parity_engine.compute_parity(today)
        except ReferenceAnchorError as e:
            LOGGER.error(f"Week status unavailable: {e}")
            await reply(
                update,
                messages.WEEK_STATUS_ERROR.format(
                    persian_date=persian_date, status=WEEK_STATUS_ERROR
                ),
            )
            return

        following = current.flip()
        text = messages.WEEK_STATUS.format(
            persian_date=persian_date,
            current_emoji=current.emoji,
            current_label=current.label,
            next_emoji=following.emoji,
            next_label=following.label,
        )
        private = is_private_chat(update)
        if private:
            text += await self._today_section(update.effective_user.id, current, today)
        await reply(update, text, week_status_keyboard(private))

    async def show_status(self, update: Update, context: CallbackContext) -> None:
        today = self.week_parity_engine.today()
        try:
            status = self.week_parity_engine.compute_parity(today).label
        except ReferenceAnchorError as e:
            LOGGER.error(f"Week status unavailable: {e}")
            status = WEEK_STATUS_ERROR
        await reply(
            update,
            messages.STATUS_LINE.format(
                persian_date=format_persian_date(today), status=status
            ),
        )

    async def show_today(self, update: Update, context: CallbackContext) -> None:
        today = self.week_parity_engine.today()
        try:
            parity = self.week_parity_engine.compute_parity(today)
        except ReferenceAnchorError as e:
            LOGGER.error(f"Week status unavailable: {e}")
            await reply(update, messages.ERROR_OCCURRED)
            return
        text = f"{format_persian_date(today)}\n📊 هفته {parity.label}\n\n"
        text += await self._today_section(update.effective_user.id, parity, today)
        await reply(update, text)

    async def _today_section(self, user_id: int, parity: Parity, today: date) -> str:
        day_index = persian_weekday_index(today)
        day_name = PERSIAN_WEEKDAYS_FULL[day_index]
        if day_index >= len(ENGLISH_WEEKDAYS):
            return messages.WEEKEND_MESSAGE.format(day_name=day_name)

        schedule = await self.schedule_repository.get_user_schedule(user_id)
        lessons = schedule.lessons_on(parity, ENGLISH_WEEKDAYS[day_index])
        if not lessons:
            return messages.NO_SCHEDULE_TODAY.format(day_name=day_name, status=parity.label)
        return messages.TODAY_HEADER.format(day_name=day_name) + format_lessons(
            lessons, with_slots=True
        )
