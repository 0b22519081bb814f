from __future__ import annotations

from telegram import Update
from telegram.ext import CallbackContext

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.constants import ENGLISH_WEEKDAYS
from weekly_schedule_bot.entities.constants import PERSIAN_WEEKDAYS
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands import messages
from weekly_schedule_bot.use_cases.telegram_commands.common import format_lessons
from weekly_schedule_bot.use_cases.telegram_commands.common import is_private_chat
from weekly_schedule_bot.use_cases.telegram_commands.common import reply
from weekly_schedule_bot.use_cases.telegram_commands.keyboards import back_to_menu_keyboard
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine
from weekly_schedule_bot.utils.exceptions import ReferenceAnchorError
from weekly_schedule_bot.utils.jalali_calendar import get_persian_month_name
from weekly_schedule_bot.utils.jalali_calendar import jalali_to_gregorian
from weekly_schedule_bot.utils.jalali_calendar import persian_weekday_index
from weekly_schedule_bot.utils.persian_text import parse_jalali_date


class Teleport:
    """/teleport <date>: which week a future Jalali date falls in."""

    def __init__(
        self,
        week_parity_engine: WeekParityEngine,
        schedule_repository: ScheduleRepositoryInterface,
    ):
        self.week_parity_engine = week_parity_engine
        self.schedule_repository = schedule_repository

    async def teleport(self, update: Update, context: CallbackContext) -> None:
        if not context.args:
            await reply(update, messages.TELEPORT_PROMPT)
            return

        raw_date = " ".join(context.args)
        jalali = parse_jalali_date(raw_date)
        target = jalali_to_gregorian(jalali.year, jalali.month, jalali.day) if jalali else None
        if target is None:
            LOGGER.info(f"Rejected teleport date: {raw_date!r}")
            await reply(update, messages.TELEPORT_INVALID)
            return

        if target <= self.week_parity_engine.today():
            await reply(update, messages.TELEPORT_PAST)
            return

        try:
            parity = self.week_parity_engine.compute_parity(target)
        except ReferenceAnchorError as e:
            LOGGER.error(f"Teleport unavailable: {e}")
            await reply(update, messages.ERROR_OCCURRED)
            return

        text = messages.TELEPORT_RESULT.format(
            day=jalali.day,
            month_name=get_persian_month_name(jalali.month),
            year=jalali.year,
            status=parity.label,
        )

        if is_private_chat(update):
            day_index = persian_weekday_index(target)
            if day_index < len(ENGLISH_WEEKDAYS):
                schedule = await self.schedule_repository.get_user_schedule(
                    update.effective_user.id
                )
                lessons = schedule.lessons_on(parity, ENGLISH_WEEKDAYS[day_index])
                text += messages.TELEPORT_DAY_HEADER.format(
                    day_name=PERSIAN_WEEKDAYS[day_index]
                )
                text += format_lessons(lessons) if lessons else messages.TELEPORT_FREE_DAY
            else:
                text += messages.TELEPORT_WEEKEND

        await reply(update, text, back_to_menu_keyboard())
